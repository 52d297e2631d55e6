"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


def _probe(check) -> dict:
    """Run a dependency check and report whether it succeeded."""
    try:
        healthy = check()
    except Exception as e:
        logger.warning("Readiness probe %s failed: %s", check.__name__, e)
        return {'healthy': False, 'error': str(e)}
    return {'healthy': bool(healthy)}


def _database_ok() -> bool:
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')
    return True


def _cache_ok() -> bool:
    cache.set('health_check', 'ok', 10)
    return cache.get('health_check') == 'ok'


class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe: database and cache must both answer."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': _probe(_database_ok),
            'cache': _probe(_cache_ok),
        }
        ready = all(check['healthy'] for check in checks.values())
        return Response(
            {'status': 'ready' if ready else 'not_ready', 'checks': checks},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )


class LivenessCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
