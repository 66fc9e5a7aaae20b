from django.contrib import admin
from .models import Flight


@admin.register(Flight)
class FlightAdmin(admin.ModelAdmin):
    list_display = ['flight_number', 'airline', 'departure_airport', 'arrival_airport', 'departure_time', 'status']
    list_filter = ['status', 'airline']
    search_fields = ['flight_number', 'airline']
    ordering = ['departure_time', 'id']
