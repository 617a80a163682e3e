import uuid

from django.db import migrations, models


STATUS_CHOICES = [('upcoming', 'Upcoming'), ('completed', 'Completed')]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Devotional',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('speaker', models.CharField(max_length=200)),
                ('cover_image_url', models.URLField(blank=True, max_length=500)),
                ('topics', models.JSONField(blank=True, default=list)),
                ('live_link', models.URLField(blank=True, max_length=500)),
                ('recording_link', models.URLField(blank=True, max_length=500)),
                ('download_link', models.URLField(blank=True, max_length=500)),
                ('status', models.CharField(choices=STATUS_CHOICES, default='upcoming', max_length=20)),
                ('featured_on_homepage', models.BooleanField(default=False)),
                ('author', models.CharField(max_length=200)),
                ('content', models.TextField()),
                ('scripture_reference', models.CharField(blank=True, help_text='e.g. John 3:16', max_length=200)),
                ('event_date', models.DateTimeField(blank=True, null=True)),
                ('event_time', models.CharField(blank=True, help_text='e.g. 7:00 PM MT', max_length=50)),
            ],
            options={
                'ordering': ('-event_date', '-created_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='CareerEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('speaker', models.CharField(max_length=200)),
                ('cover_image_url', models.URLField(blank=True, max_length=500)),
                ('topics', models.JSONField(blank=True, default=list)),
                ('live_link', models.URLField(blank=True, max_length=500)),
                ('recording_link', models.URLField(blank=True, max_length=500)),
                ('download_link', models.URLField(blank=True, max_length=500)),
                ('status', models.CharField(choices=STATUS_CHOICES, default='upcoming', max_length=20)),
                ('featured_on_homepage', models.BooleanField(default=False)),
                ('description', models.TextField()),
                ('position', models.CharField(blank=True, help_text='e.g. CEO, TechCorp Solutions', max_length=200)),
                ('industry', models.CharField(choices=[('Business', 'Business'), ('Technology', 'Technology'), ('Healthcare', 'Healthcare'), ('Finance', 'Finance'), ('Education', 'Education'), ('Engineering', 'Engineering'), ('Legal', 'Legal'), ('Marketing', 'Marketing')], max_length=50)),
                ('event_date', models.DateTimeField()),
                ('location', models.CharField(max_length=200)),
                ('attendees', models.PositiveIntegerField(default=0)),
                ('registration_url', models.URLField(blank=True, max_length=500)),
                ('registration_required', models.BooleanField(default=False)),
            ],
            options={
                'ordering': ('-event_date', '-created_at'),
                'abstract': False,
            },
        ),
    ]
