from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Flight',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('flight_number', models.CharField(help_text='Carrier code and number, e.g. NZ123', max_length=10, unique=True)),
                ('airline', models.CharField(help_text='Operating airline name', max_length=100)),
                ('airline_key', models.TextField(default='', editable=False, help_text='Case-folded airline name used for search')),
                ('departure_airport', models.CharField(help_text='IATA or ICAO code of the origin airport', max_length=5)),
                ('arrival_airport', models.CharField(help_text='IATA or ICAO code of the destination airport', max_length=5)),
                ('departure_time', models.DateTimeField(help_text='Scheduled departure (UTC)')),
                ('arrival_time', models.DateTimeField(help_text='Scheduled arrival (UTC)')),
                ('status', models.CharField(choices=[('Scheduled', 'Scheduled'), ('Delayed', 'Delayed'), ('Cancelled', 'Cancelled'), ('InAir', 'In Air'), ('Landed', 'Landed')], default='Scheduled', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'flights',
                'ordering': ['departure_time', 'id'],
                'indexes': [
                    models.Index(fields=['departure_airport', 'departure_time'], name='flights_dep_airport_time_idx'),
                    models.Index(fields=['arrival_airport', 'arrival_time'], name='flights_arr_airport_time_idx'),
                ],
            },
        ),
    ]
