import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='NewsArticle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('academic', 'Academic'), ('student-life', 'Student Life'), ('career', 'Career'), ('spiritual', 'Spiritual')], max_length=50)),
                ('summary', models.TextField()),
                ('content', models.TextField()),
                ('video_url', models.URLField(blank=True, max_length=500)),
                ('image_urls', models.JSONField(blank=True, default=list)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('is_hot', models.BooleanField(default=False)),
                ('featured_on_homepage', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': 'News article',
                'verbose_name_plural': 'News articles',
                'ordering': ('-created_at',),
                'abstract': False,
            },
        ),
    ]
