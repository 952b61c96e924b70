from django.db import connection
from django.http import HttpResponse


def health_check(request):
    """Health check response for Elastic Beanstalk."""
    if request.GET.get("db") == "1":
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    return HttpResponse("OK")
