from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.billing.api.v1.views import RevenueViewSet

router = DefaultRouter()
router.register(r'revenue', RevenueViewSet, basename='revenue')

urlpatterns = [
    path('', include(router.urls)),
]
