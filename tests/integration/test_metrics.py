"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Allocation metrics are incremented on signup
3. Failed allocations are counted by outcome
4. HTTP requests are labelled by route template
"""

import pytest
from httpx import AsyncClient

from src.core.metrics import REGISTRY


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def _signup(email: str, branch_id: str = "main") -> dict:
    return {
        "email": email,
        "display_name": "Metrics User",
        "branch_id": branch_id,
        "firebase_uid": f"fb-{email}",
    }


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient):
        response = await client.get("/metrics")

        assert response.status_code == 200

        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type

        content = response.text
        assert "# HELP" in content
        assert "erp_sequence_allocation_latency_seconds" in content


# =============================================================================
# Business / Technical Metrics Tests
# =============================================================================

class TestAllocationMetrics:
    """Allocation and signup metrics."""

    @pytest.mark.asyncio
    async def test_signup_records_allocation_and_user(self, client: AsyncClient):
        success_labels = {"family": "user", "outcome": "success"}
        users_labels = {"branch_code": "SYL"}
        allocations_before = _sample("erp_sequence_allocations_total", success_labels)
        users_before = _sample("erp_users_created_total", users_labels)

        response = await client.post("/v1/users", json=_signup("syl@example.com", "sylhet"))

        assert response.status_code == 201
        assert _sample("erp_sequence_allocations_total", success_labels) == allocations_before + 1
        assert _sample("erp_users_created_total", users_labels) == users_before + 1
        assert _sample("erp_sequence_last_value", {"family": "user"}) == 1

    @pytest.mark.asyncio
    async def test_unavailable_store_is_counted(
        self,
        client_with_unavailable_store: AsyncClient,
    ):
        labels = {"family": "user", "outcome": "unavailable"}
        before = _sample("erp_sequence_allocations_total", labels)

        response = await client_with_unavailable_store.post(
            "/v1/users",
            json=_signup("down@example.com"),
        )

        assert response.status_code == 503
        assert _sample("erp_sequence_allocations_total", labels) == before + 1


class TestHttpMetrics:
    """HTTP request metrics."""

    @pytest.mark.asyncio
    async def test_requests_labelled_by_route_template(self, client: AsyncClient):
        labels = {"method": "GET", "endpoint": "/v1/users/{unique_id}", "status": "404"}
        before = _sample("erp_http_requests_total", labels)

        await client.get("/v1/users/DH-4242")
        await client.get("/v1/users/BOG-4242")

        assert _sample("erp_http_requests_total", labels) == before + 2
