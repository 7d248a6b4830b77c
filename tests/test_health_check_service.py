from unittest.mock import MagicMock

import pytest

from deploy_dashboard.services.health_check_service import (
    CHECK_NAME,
    HEALTH_PATH,
    evaluate_health,
    run_health_check,
)


class TestEvaluateHealth:
    def test_200_passes(self):
        result = evaluate_health(200)
        assert result.passed is True
        assert result.name == "health ok"
        assert result.status_code == 200

    @pytest.mark.parametrize("status_code", [0, 201, 204, 301, 404, 500, 503])
    def test_anything_else_fails(self, status_code):
        assert evaluate_health(status_code).passed is False


class TestRunHealthCheck:
    @pytest.fixture
    def session(self):
        return MagicMock()

    def _response(self, session, status_code):
        response = session.get.return_value.__enter__.return_value
        response.status_code = status_code
        return response

    def test_healthy_iterations(self, session):
        response = self._response(session, 200)

        results = [run_health_check(session) for _ in range(5)]

        assert all(r.passed for r in results)
        assert response.success.call_count == 5
        response.failure.assert_not_called()

    def test_unhealthy_iterations_do_not_abort(self, session):
        response = self._response(session, 503)

        results = [run_health_check(session) for _ in range(5)]

        assert [r.passed for r in results] == [False] * 5
        assert response.failure.call_count == 5
        response.success.assert_not_called()
        assert CHECK_NAME in response.failure.call_args[0][0]

    def test_one_request_per_iteration(self, session):
        self._response(session, 503)

        run_health_check(session)

        session.get.assert_called_once_with(HEALTH_PATH, catch_response=True)

    def test_connection_error_counts_as_failure(self, session):
        response = self._response(session, None)

        result = run_health_check(session)

        assert result.passed is False
        assert result.status_code == 0
        response.failure.assert_called_once()
