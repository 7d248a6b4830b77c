"""Single-iteration health check driven by a load-generation runner.

The runner (locust) owns virtual users, pacing and run time. Each iteration
builds one request and evaluates one predicate; the outcome is handed to the
runner's statistics through the ``catch_response`` context and never raised.
"""

from typing import Any

from deploy_dashboard.schemas.health_check import CheckResult

HEALTH_PATH = "/health"
CHECK_NAME = "health ok"


def evaluate_health(status_code: int) -> CheckResult:
    return CheckResult(name=CHECK_NAME, passed=status_code == 200, status_code=status_code)


def run_health_check(client: Any) -> CheckResult:
    """Issues one ``GET /health`` and records the check with the runner.

    Args:
        client: A locust ``HttpSession`` (or anything exposing the same
            ``get(..., catch_response=True)`` context manager).

    Returns:
        CheckResult: Outcome of this iteration. Connection errors surface as
        status 0 and count as a failed check.
    """
    with client.get(HEALTH_PATH, catch_response=True) as response:
        result = evaluate_health(response.status_code or 0)
        if result.passed:
            response.success()
        else:
            response.failure(f"check '{CHECK_NAME}' failed: status={result.status_code}")
    return result
