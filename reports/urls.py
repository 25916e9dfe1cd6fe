# reports/urls.py

from django.urls import path
from .views import ClientValueExtremesView, CostReportView, WifiOrderStatusView

urlpatterns = [
    path("cost", CostReportView.as_view()),
    path("client-extremes", ClientValueExtremesView.as_view()),
    path("wifi-orders", WifiOrderStatusView.as_view()),
]
