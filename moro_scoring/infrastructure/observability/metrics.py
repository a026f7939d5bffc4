"""Prometheus metrics for scoring outcomes, data store health and request latency"""

from prometheus_client import Counter, Histogram

scoring_counter = Counter(
    "moro_scoring_total",
    "Financing scores computed",
    ["recommendation"],  # approve | review | reject
)

score_histogram = Histogram(
    "moro_score",
    "Distribution of total financing scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

applicant_not_found_counter = Counter(
    "moro_applicant_not_found_total",
    "Scoring requests for unknown applicants",
)

data_store_failures_counter = Counter(
    "moro_data_store_failures_total",
    "Failed data store reads",
)

application_counter = Counter(
    "moro_financing_applications_total",
    "Financing applications submitted",
    ["status"],  # submitted_to_coop | submitted_to_admin
)

request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_scoring(total_score: int, recommendation: str) -> None:
    scoring_counter.labels(recommendation=recommendation).inc()
    score_histogram.observe(total_score)
