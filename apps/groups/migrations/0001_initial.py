# Generated manually for groups app

import uuid
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('description', models.TextField()),
                ('category', models.CharField(choices=[('Technology', 'Technology'), ('Science', 'Science'), ('Sports', 'Sports'), ('Music', 'Music'), ('Art', 'Art'), ('Education', 'Education'), ('Health', 'Health'), ('Business', 'Business'), ('Gaming', 'Gaming'), ('Travel', 'Travel'), ('Lifestyle', 'Lifestyle'), ('Other', 'Other')], max_length=50)),
                ('slug', models.SlugField(editable=False, max_length=255, unique=True)),
                ('creator', models.JSONField(default=dict, editable=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'groups',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['category', 'created_at'], name='groups_category_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='GroupMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('member_id', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=255)),
                ('name', models.CharField(blank=True, max_length=200)),
                ('role', models.CharField(choices=[('user', 'User'), ('admin', 'Admin'), ('moderator', 'Moderator')], default='user', max_length=20)),
                ('position', models.PositiveIntegerField(default=0)),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='groups.group')),
            ],
            options={
                'db_table': 'group_members',
                'ordering': ['position', 'joined_at'],
                'indexes': [models.Index(fields=['group', 'position'], name='group_members_position_idx')],
                'constraints': [models.UniqueConstraint(fields=('group', 'email'), name='unique_group_member_email')],
            },
        ),
    ]
