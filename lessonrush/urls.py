"""
URL configuration for lessonrush project.
"""
from django.contrib import admin
from django.urls import path, include
from . import views

# Error handlers
handler404 = 'lessonrush.views.handler404'
handler500 = 'lessonrush.views.handler500'

urlpatterns = [
    path('health/', views.health_check, name='health_check'),
    path('admin/', admin.site.urls),

    # Waitlist API
    path('api/', include(('api.urls', 'api'), namespace='api')),

    # Marketing pages (served at the site root)
    path('', include('landing.urls')),
]
