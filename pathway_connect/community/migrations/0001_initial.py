import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='WhatsAppGroup',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_published', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('Major', 'Major'), ('Course', 'Course'), ('General', 'General')], max_length=20)),
                ('description', models.TextField()),
                ('link', models.URLField(help_text='Invite link, e.g. https://chat.whatsapp.com/...', max_length=500)),
                ('members', models.PositiveIntegerField(default=0)),
                ('icon', models.CharField(default='MessageCircle', max_length=50)),
                ('color', models.CharField(default='bg-gray-100 text-gray-800', max_length=100)),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'WhatsApp group',
                'verbose_name_plural': 'WhatsApp groups',
                'ordering': ('category', 'name'),
                'abstract': False,
            },
        ),
    ]
