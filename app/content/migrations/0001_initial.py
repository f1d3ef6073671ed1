from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Article",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(help_text="URL-safe identifier for this record", max_length=255, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("title", models.CharField(help_text="Article headline", max_length=255)),
                ("body", models.TextField(blank=True, default="", help_text="Article text")),
            ],
            options={
                "verbose_name": "Article",
                "verbose_name_plural": "Articles",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Page",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("name", models.CharField(help_text="Page name", max_length=255)),
                ("path", models.CharField(blank=True, default="", help_text="URL path of the page", max_length=255)),
            ],
            options={
                "verbose_name": "Page",
                "verbose_name_plural": "Pages",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Block",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("blockable_type", models.CharField(help_text="Parent type tag (morph map key or app_label.ModelName)", max_length=255)),
                ("blockable_id", models.CharField(help_text="Parent primary key", max_length=64)),
                ("type", models.CharField(help_text="Block kind", max_length=100)),
                ("position", models.PositiveIntegerField(default=0, help_text="Order within the parent")),
                ("content", models.JSONField(blank=True, default=dict, help_text="Block fields")),
            ],
            options={
                "verbose_name": "Block",
                "verbose_name_plural": "Blocks",
                "ordering": ["position", "id"],
                "indexes": [
                    models.Index(fields=["blockable_type", "blockable_id"], name="block_parent_idx"),
                ],
            },
        ),
    ]
