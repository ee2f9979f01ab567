import core.ids
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Content',
            fields=[
                ('id', models.CharField(default=core.ids.new_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('key', models.CharField(max_length=150, unique=True)),
                ('type', models.CharField(choices=[('page', 'Page'), ('section', 'Section'), ('faq', 'FAQ'), ('setting', 'Setting')], db_index=True, max_length=10)),
                ('content', models.JSONField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='content_updates', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['type', 'key'],
            },
        ),
    ]
