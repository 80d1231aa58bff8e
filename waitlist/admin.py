"""Django admin configuration for waitlist signups"""
from django.contrib import admin
from .models import WaitlistEntry


@admin.register(WaitlistEntry)
class WaitlistEntryAdmin(admin.ModelAdmin):
    """Admin interface for reviewing waitlist signups and their feedback"""

    list_display = [
        'email',
        'pain_point_count',
        'has_feedback',
        'created_at',
        'updated_at',
    ]

    list_filter = [
        'created_at',
        'updated_at',
    ]

    search_fields = [
        'email',
        'feedback',
    ]

    readonly_fields = ['uuid', 'created_at', 'updated_at']

    fieldsets = (
        ('Signup', {
            'fields': ('email', 'uuid')
        }),
        ('Feedback', {
            'fields': ('feedback', 'pain_points')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='Pain points')
    def pain_point_count(self, obj):
        return len(obj.pain_points or [])

    @admin.display(boolean=True, description='Feedback')
    def has_feedback(self, obj):
        return obj.has_feedback
