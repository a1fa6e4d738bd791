from prometheus_client import Counter, Histogram

# Upstream attempts (one per candidate model tried)
upstream_attempts = Counter(
    'script_relay_upstream_attempts_total',
    'Upstream generateContent attempts',
    ['model', 'outcome']  # success, error
)

upstream_latency = Histogram(
    'script_relay_upstream_latency_seconds',
    'Upstream generateContent latency',
    ['model'],
    buckets=(0.5, 1, 2, 5, 10, 30, 60)
)

# Relay requests
relay_requests = Counter(
    'script_relay_requests_total',
    'Generate-script requests by terminal outcome',
    ['outcome']  # success, config_error, exhausted
)
