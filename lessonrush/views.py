"""
Core views for LessonRush
"""
from django.http import JsonResponse
from django.shortcuts import render


def health_check(request):
    """Health check endpoint for monitoring"""
    return JsonResponse({
        'status': 'healthy',
        'service': 'lessonrush',
        'version': '0.1.0'
    })


def handler404(request, exception):
    """Custom 404 error handler"""
    return render(request, 'landing/404.html', status=404)


def handler500(request):
    """Custom 500 error handler"""
    return render(request, 'landing/500.html', status=500)
