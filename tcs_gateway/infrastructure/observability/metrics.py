"""Prometheus metrics for score distribution and request latency"""

from prometheus_client import Counter, Histogram

# Score metrics
score_counter = Counter(
    "tcs_score_total",
    "Total TCS scores calculated",
    ["band"],  # Excellent | Very Good | Good | Fair | Poor | Very Poor
)

score_histogram = Histogram(
    "tcs_score_value",
    "Distribution of calculated TCS scores",
    buckets=[300, 550, 600, 650, 700, 750, 850],
)

expenses_per_request_histogram = Histogram(
    "tcs_expenses_per_request",
    "Number of expense records submitted per score request",
    buckets=[0, 1, 5, 10, 25, 50, 100, 500, 1000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: int, band: str, expense_count: int) -> None:
    """Record one scoring call"""
    score_counter.labels(band=band).inc()
    score_histogram.observe(score)
    expenses_per_request_histogram.observe(expense_count)
