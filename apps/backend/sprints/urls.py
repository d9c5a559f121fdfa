from django.urls import path
from . import views

app_name = 'sprints'

urlpatterns = [
    path('', views.sprint_form, name='form'),
    path('plan', views.sprint_plan, name='plan'),
    path('api/health', views.health, name='health'),
    path('api/plan', views.plan_api, name='plan-api'),
]
