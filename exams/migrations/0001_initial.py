import django.core.validators
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
            name='Question',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('content', models.TextField()),
                ('category', models.CharField(choices=[
                    ('Pertemuan 1-Pemikiran Sistem', 'Pertemuan 1-Pemikiran Sistem'),
                    ('PERTEMUAN 2- ANALISIS JARINGAN', 'PERTEMUAN 2- ANALISIS JARINGAN'),
                    ('Pertemuan 3-Parameter Analisis Jaringan', 'Pertemuan 3-Parameter Analisis Jaringan'),
                    ('Pertemuan 4-Analisis Jaringan Pada Manajemen Proyek', 'Pertemuan 4-Analisis Jaringan Pada Manajemen Proyek'),
                    ('Pertemuan 5- Simulasi Monte Carlo', 'Pertemuan 5- Simulasi Monte Carlo'),
                    ('Game Theory 2xN', 'Game Theory 2xN'),
                    ('Game Theory MxN', 'Game Theory MxN'),
                ], max_length=100)),
                ('max_score', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('keywords', models.JSONField(blank=True, null=True)),
                ('answer_pattern', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='questions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('max_score__gt', 0)), name='question_max_score_positive'),
                ],
            },
        ),
    ]
