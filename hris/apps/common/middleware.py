import logging

logger = logging.getLogger('django.server')


def get_client_ip(request):
    """Получение IP-адреса клиента с учетом прокси"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class RequestLoggingMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        logger.info(
            "%s %s from IP: %s -> %s",
            request.method,
            request.path,
            get_client_ip(request),
            response.status_code,
        )
        return response
