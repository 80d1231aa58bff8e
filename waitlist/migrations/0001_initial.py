import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='WaitlistEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('uuid', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Public identifier returned by the API (non-enumerable)', unique=True)),
                ('email', models.EmailField(help_text='Email address with a lower-cased domain', max_length=254, unique=True)),
                ('feedback', models.TextField(blank=True, default='', help_text='Free-text feedback on what the product should solve')),
                ('pain_points', models.JSONField(blank=True, default=list, help_text='Selected pain points, in the order they were submitted')),
            ],
            options={
                'verbose_name': 'Waitlist Entry',
                'verbose_name_plural': 'Waitlist Entries',
                'db_table': 'waitlist_entries',
                'ordering': ['-created_at'],
            },
        ),
    ]
