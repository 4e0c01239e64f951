from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # Counters register under several names; any of them finds the collector.
        for key in (name, f"{name}_total"):
            if key in REGISTRY._names_to_collectors:
                return REGISTRY._names_to_collectors[key]
        raise


REQUESTS_TOTAL = get_or_create_metric(
    "tasker_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "tasker_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

EXTRACTIONS_TOTAL = get_or_create_metric(
    "tasker_extractions_total",
    "Natural-language extractions by outcome",
    Counter,
    labelnames=["outcome"],
)

TASKS_GAUGE = get_or_create_metric(
    "tasker_tasks", "Tasks currently held in the session store", Gauge
)
