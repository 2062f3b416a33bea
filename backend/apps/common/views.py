import time

from django.db import DatabaseError, connections
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

READY_STATUS = {True: ('ok', 200), False: ('degraded', 503)}


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _db_check(alias='default'):
    """Round-trip ``SELECT 1`` on ``alias``; failures are reported, never raised."""
    started = time.perf_counter()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as exc:
        logger.warning('Catalog database unreachable', alias=alias, error=str(exc))
        return {'status': 'fail', 'error': str(exc)}
    latency = _elapsed_ms(started)
    logger.debug('Catalog database reachable', alias=alias, latency_ms=latency)
    return {'status': 'ok', 'latency_ms': latency}


def live_health(request):
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness: the catalog can serve requests only while its database answers."""
    database = _db_check()
    healthy = database['status'] == 'ok'
    overall, http_status = READY_STATUS[healthy]
    logger.info('Readiness evaluated', status=overall)
    return JsonResponse({'status': overall, 'checks': {'database': database}}, status=http_status)
