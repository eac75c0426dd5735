"""
Testes para rate limiting
"""
from app.core.config import settings
from app.core.rate_limit import LOGIN_LIMIT, limiter


class TestRateLimiting:
    """Testes para rate limiting"""

    def test_rate_limit_config(self):
        """Rate limiting é desabilitado nos testes via variável de ambiente"""
        assert settings.RATE_LIMIT_ENABLED is False
        assert limiter.enabled is False
        assert LOGIN_LIMIT == settings.LOGIN_RATE_LIMIT

    def test_health_endpoint_no_rate_limit(self, client):
        """Health endpoints não devem ter rate limiting"""
        for _ in range(3):
            assert client.get("/api/health").status_code == 200
            assert client.get("/api/health/live").status_code == 200
            assert client.get("/api/health/ready").status_code == 200
