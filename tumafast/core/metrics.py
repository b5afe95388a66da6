"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

quotes_issued = Counter(
    'quotes_issued_total',
    'Total price quotes computed',
    ['vehicle_class', 'service_tier'],
    registry=registry
)

quote_price = Histogram(
    'quote_price_kes',
    'Distribution of quoted prices',
    ['vehicle_class'],
    buckets=(100, 250, 500, 1000, 2500, 5000, 10000, 25000, 50000, 100000),
    registry=registry
)

arrival_estimates = Counter(
    'arrival_estimates_total',
    'Total arrival estimates computed',
    ['service_tier', 'scheduled'],
    registry=registry
)

rate_fallbacks = Counter(
    'pricing_rate_fallbacks_total',
    'Unknown vehicle classes or service tiers priced with default rates',
    ['field'],
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
