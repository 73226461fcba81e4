# Generated manually for discussions app

import uuid
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('groups', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Discussion',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('content', models.TextField()),
                ('category', models.CharField(blank=True, max_length=50)),
                ('slug', models.SlugField(editable=False, max_length=255, unique=True)),
                ('username', models.CharField(max_length=200)),
                ('likes', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='discussions', to='groups.group')),
            ],
            options={
                'db_table': 'discussions',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['group', 'created_at'], name='discussions_group_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('email', models.EmailField(max_length=255)),
                ('username', models.CharField(blank=True, max_length=200)),
                ('likes', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('discussion', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='discussions.discussion')),
            ],
            options={
                'db_table': 'discussion_comments',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['discussion', 'created_at'], name='comments_disc_created_idx')],
            },
        ),
    ]
