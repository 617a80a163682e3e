import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Book',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('author', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('file_url', models.URLField(max_length=500)),
                ('cover_image_url', models.URLField(blank=True, max_length=500)),
                ('category', models.CharField(choices=[('academic', 'Academic'), ('spiritual', 'Spiritual'), ('career', 'Career Development'), ('personal', 'Personal Development')], max_length=50)),
            ],
            options={
                'verbose_name': 'Digital book',
                'verbose_name_plural': 'Digital books',
                'ordering': ('-created_at',),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('company', models.CharField(max_length=200)),
                ('location', models.CharField(help_text='Remote, New York, etc.', max_length=200)),
                ('salary_range', models.CharField(blank=True, help_text='e.g. $50,000 - $70,000', max_length=100)),
                ('job_type', models.CharField(choices=[('full-time', 'Full-time'), ('part-time', 'Part-time'), ('contract', 'Contract'), ('internship', 'Internship')], default='full-time', max_length=20)),
                ('experience_level', models.CharField(choices=[('entry-level', 'Entry Level'), ('mid-level', 'Mid Level'), ('senior-level', 'Senior Level'), ('executive', 'Executive')], default='entry-level', max_length=20)),
                ('category', models.CharField(choices=[('Technology', 'Technology'), ('Business', 'Business'), ('Healthcare', 'Healthcare'), ('Education', 'Education'), ('Engineering', 'Engineering'), ('Marketing', 'Marketing'), ('Finance', 'Finance'), ('Other', 'Other')], max_length=50)),
                ('description', models.TextField()),
                ('requirements', models.JSONField(blank=True, default=list)),
                ('benefits', models.JSONField(blank=True, default=list)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('application_url', models.URLField(max_length=500)),
                ('contact_email', models.EmailField(blank=True, max_length=254)),
                ('deadline', models.DateField(blank=True, null=True)),
                ('is_featured', models.BooleanField(default=False)),
            ],
            options={
                'ordering': ('-is_featured', '-created_at'),
                'abstract': False,
            },
        ),
    ]
