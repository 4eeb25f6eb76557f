import time

from django.conf import settings
from django.core.cache import caches
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

_PROBE_KEY = 'health:probe'


def _db_check(alias='default'):
    started = time.time()
    try:
        connections[alias].cursor().execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def _session_cache_check(alias=None):
    """Round-trip a key through the cache that backs cached sessions."""
    alias = alias or getattr(settings, 'SESSION_CACHE_ALIAS', 'default')
    try:
        cache = caches[alias]
        token = str(time.time())
        cache.set(_PROBE_KEY, token, timeout=5)
        if cache.get(_PROBE_KEY) != token:
            logger.warning('Session cache probe returned stale value', alias=alias)
            return {'status': 'fail', 'error': 'probe mismatch'}
        return {'status': 'ok'}
    except Exception as e:
        logger.warning('Session cache health check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the database and the session cache."""
    checks = {
        'database': _db_check(),
        'session_cache': _session_cache_check(),
    }
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(
        {'status': overall_status, 'checks': checks},
        status=200 if not failing else 503,
    )
