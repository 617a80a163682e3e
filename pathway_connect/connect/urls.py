from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('pathway_connect.main.urls')),

    # --- PUBLIC SECTIONS ---
    path('news/',      include('pathway_connect.news.urls')),
    path('resources/', include('pathway_connect.resources.urls')),
    path('events/',    include('pathway_connect.events.urls')),
    path('community/', include('pathway_connect.community.urls')),
    path('advisor/',   include('pathway_connect.advisor.urls')),

    # --- STAFF ---
    path('accounts/',  include('allauth.urls')),
    path('portal/',    include(('admin_portal.urls', 'admin_portal'), namespace='admin_portal')),
]
