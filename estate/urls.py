from django.urls import path

from . import views

urlpatterns = [
    path("api/berakning/", views.calculate_api, name="calculate_api"),
    path("sammanstallning/", views.summary, name="summary"),
]
