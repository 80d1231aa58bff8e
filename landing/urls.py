from django.urls import path
from . import views
from lessonrush import seo_views

app_name = 'landing'

urlpatterns = [
    path('', views.index, name='index'),
    path('waitlist/join/', views.join_waitlist, name='join_waitlist'),
    path('privacy-policy/', views.privacy_policy, name='privacy_policy'),
    path('terms/', views.terms, name='terms'),
    path('og-image.png', views.og_image, name='og_image'),
    path('robots.txt', seo_views.robots, name='robots'),
    path('sitemap.xml', seo_views.sitemap, name='sitemap'),
]
