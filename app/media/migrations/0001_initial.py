"""
Initial media library schema.

Table names for media and mediables come from MEDIA_LIBRARY so existing
databases with their own naming can be mapped without editing migrations.
"""

import django.db.models.deletion
from django.db import migrations, models

import media.models.media_asset
from media.conf import get_setting


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(help_text="URL-safe identifier for this record", max_length=255, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("name", models.CharField(help_text="Display name of the tag", max_length=100)),
            ],
            options={
                "verbose_name": "Tag",
                "verbose_name_plural": "Tags",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="MediaAsset",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("uuid", models.CharField(db_index=True, default=media.models.media_asset.generate_media_uuid, help_text="Key of the file in the image service", max_length=255)),
                ("filename", models.CharField(help_text="Original filename", max_length=255)),
                ("width", models.PositiveIntegerField(blank=True, help_text="Width in pixels", null=True)),
                ("height", models.PositiveIntegerField(blank=True, help_text="Height in pixels", null=True)),
                ("caption", models.JSONField(blank=True, default=str, help_text="Caption, or a locale -> caption mapping when translatable")),
                ("alt_text", models.JSONField(blank=True, default=str, help_text="Alt text, or a locale -> alt text mapping when translatable")),
                ("extra_metadatas", models.JSONField(blank=True, default=dict, help_text="Values of the configured extra metadata fields")),
                ("tags", models.ManyToManyField(blank=True, help_text="Tags applied to this media", related_name="medias", to="media.tag")),
            ],
            options={
                "verbose_name": "Media",
                "verbose_name_plural": "Medias",
                "db_table": get_setting("MEDIAS_TABLE"),
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Mediable",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Timestamp when this record was created")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Timestamp when this record was last modified")),
                ("mediable_type", models.CharField(help_text="Owner type tag (morph map key or app_label.ModelName)", max_length=255)),
                ("mediable_id", models.CharField(help_text="Owner primary key", max_length=64)),
                ("role", models.CharField(blank=True, default="", help_text="Slot the media fills on the owner", max_length=100)),
                ("locale", models.CharField(blank=True, default="", help_text="Locale this placement applies to; blank for all", max_length=10)),
                ("metadatas", models.TextField(blank=True, default="", help_text="Placement metadata as JSON text (field -> locale -> value)")),
                ("media", models.ForeignKey(help_text="The media asset being used", on_delete=django.db.models.deletion.CASCADE, related_name="mediables", to="media.mediaasset")),
            ],
            options={
                "verbose_name": "Mediable",
                "verbose_name_plural": "Mediables",
                "db_table": get_setting("MEDIABLES_TABLE"),
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["media"], name="mediable_media_idx"),
                    models.Index(fields=["mediable_type", "mediable_id"], name="mediable_owner_idx"),
                ],
            },
        ),
    ]
