"""Health check module for service dependencies."""

import asyncio
import time
from dataclasses import dataclass
from typing import Literal

import httpx

from skillgap.services.catalog import Catalogs


@dataclass
class ServiceHealth:
    """Health status for a service dependency."""

    status: Literal["connected", "unreachable", "error"]
    latency_ms: float | None = None
    error: str | None = None


async def check_news_api(base_url: str) -> ServiceHealth:
    """Check HackerNews API reachability.

    Args:
        base_url: HackerNews API base URL (e.g., https://hacker-news.firebaseio.com/v0)

    Returns:
        ServiceHealth with connection status and latency
    """
    start = time.perf_counter()
    try:
        async with asyncio.timeout(2.0):
            async with httpx.AsyncClient() as client:
                response = await client.get(f"{base_url.rstrip('/')}/maxitem.json")
                if response.status_code == 200:
                    latency = (time.perf_counter() - start) * 1000
                    return ServiceHealth(
                        status="connected", latency_ms=round(latency, 2)
                    )
                return ServiceHealth(
                    status="error", error=f"HTTP {response.status_code}"
                )
    except TimeoutError:
        return ServiceHealth(status="unreachable", error="timeout")
    except httpx.HTTPError as e:
        return ServiceHealth(status="error", error=str(e))


def catalog_stats(catalogs: Catalogs | None) -> dict[str, int | bool]:
    """Summarize the loaded role tables for the health endpoint."""
    if catalogs is None:
        return {"loaded": False, "roles": 0, "roles_with_learning_order": 0}
    return {
        "loaded": True,
        "roles": len(catalogs.required_skills),
        "roles_with_learning_order": len(catalogs.learning_order),
    }
