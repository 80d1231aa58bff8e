"""
Management command to export waitlist signups as CSV

Usage:
    python manage.py export_waitlist
    python manage.py export_waitlist --output waitlist.csv
    python manage.py export_waitlist --with-feedback
"""

import csv
from django.core.management.base import BaseCommand, CommandError
from waitlist.models import WaitlistEntry

PAIN_POINT_SEPARATOR = ' | '

HEADER = ['email', 'feedback', 'pain_points', 'created_at', 'updated_at']


class Command(BaseCommand):
    help = 'Export waitlist entries as CSV'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output',
            type=str,
            help='Write CSV to this file instead of stdout'
        )
        parser.add_argument(
            '--with-feedback',
            action='store_true',
            help='Only export entries that left feedback or selected pain points'
        )

    def handle(self, *args, **options):
        entries = WaitlistEntry.objects.order_by('created_at', 'id')

        output_path = options.get('output')
        if output_path:
            try:
                with open(output_path, 'w', newline='', encoding='utf-8') as f:
                    count = self._write_csv(f, entries, options['with_feedback'])
            except OSError as e:
                raise CommandError(f'Could not write {output_path}: {e}')
            self.stderr.write(self.style.SUCCESS(f'Exported {count} entries to {output_path}'))
        else:
            count = self._write_csv(self.stdout, entries, options['with_feedback'])
            self.stderr.write(self.style.SUCCESS(f'Exported {count} entries'))

    def _write_csv(self, stream, entries, with_feedback=False):
        """Write the header and one row per entry, returning the row count"""
        writer = csv.writer(stream)
        writer.writerow(HEADER)
        count = 0
        for entry in entries.iterator():
            if with_feedback and not (entry.has_feedback or entry.pain_points):
                continue
            writer.writerow([
                entry.email,
                entry.feedback,
                PAIN_POINT_SEPARATOR.join(entry.pain_points or []),
                entry.created_at.isoformat(),
                entry.updated_at.isoformat(),
            ])
            count += 1
        return count
