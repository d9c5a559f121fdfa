from django.urls import include, path

urlpatterns = [
    path('', include('sprints.urls')),
]
