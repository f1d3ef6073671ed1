"""
Tests for the Owner Projector.

These tests verify:
- Descriptors for titled, sluggable and untitled owners
- Module names and edit links
- Blocks are replaced by their parent entity
- Unresolvable records are dropped and announced via owner_unresolved
- Optional de-duplication keeps the first descriptor per owner
"""

from __future__ import annotations

import pytest

from content.models import Article, Page
from content.tests.factories import ArticleFactory, BlockFactory
from media.models import Mediable
from media.registry import OwnerTypeRegistry
from media.services.owners import (
    REASON_MISSING_ENTITY,
    REASON_MISSING_PARENT,
    REASON_UNRESOLVABLE_TYPE,
    OwnerDescriptor,
    OwnerProjector,
    module_name_for,
)
from media.services.ownership import OwnershipIndexReader, OwnershipRecord
from media.services.routes import RouteBuilder
from media.signals import owner_unresolved
from media.tests.factories import MediableFactory, TagFactory


# =============================================================================
# Helpers
# =============================================================================


class BlogPost:
    """Plain owner object with a title."""

    title_key = "headline"

    def __init__(self, id, headline):
        self.id = id
        self.headline = headline


class DictLoader:
    """EntityLoader over an in-memory dict."""

    def __init__(self, entities):
        self.entities = entities

    def find_by_id(self, entity_id):
        return self.entities.get(entity_id)


@pytest.fixture
def unresolved():
    """Collect owner_unresolved notifications for the test."""
    received = []

    def receiver(sender, record, reason, **kwargs):
        received.append((record, reason))

    owner_unresolved.connect(receiver, dispatch_uid="test_owner_unresolved")
    yield received
    owner_unresolved.disconnect(dispatch_uid="test_owner_unresolved")


def owners_of(media, unique=False):
    records = OwnershipIndexReader().find_owners(media.pk)
    return OwnerProjector().project(records, unique=unique)


# =============================================================================
# module_name_for
# =============================================================================


class TestModuleNameFor:
    """Tests for module_name_for()."""

    def test_model_instance(self):
        """Model names are lower-camel-cased and pluralized."""
        assert module_name_for(Article()) == "articles"
        assert module_name_for(Page()) == "pages"

    def test_plain_object(self):
        """Plain objects use their class name."""
        assert module_name_for(BlogPost(1, "Hi")) == "blogPosts"


# =============================================================================
# Descriptors
# =============================================================================


@pytest.mark.django_db
class TestDescribeOwners:
    """Tests for descriptors of resolved owners."""

    def test_article_owner(self, media, article):
        """A titled, sluggable owner yields a full descriptor."""
        Mediable.attach(media, article, role="cover")

        owners = owners_of(media)

        assert len(owners) == 1
        owner = owners[0]
        assert owner.id == article.pk
        assert owner.slug == "hello"
        assert owner.name == "Hello"
        assert owner.title_key == "title"
        assert owner.module == "articles"
        assert owner.edit == f"/admin/content/articles/{article.pk}/edit/"
        assert owner.model == article

    def test_page_owner(self, media, page):
        """Owners without slug report None."""
        Mediable.attach(media, page)

        owner = owners_of(media)[0]

        assert owner.slug is None
        assert owner.name == "About"
        assert owner.title_key == "name"
        assert owner.module == "pages"
        assert owner.edit == f"/admin/content/pages/{page.pk}/edit/"

    def test_untitled_owner(self, media):
        """Owners without a title attribute are named by str()."""
        tag = TagFactory(name="Summer")
        MediableFactory(media=media, mediable_type="media.Tag", mediable_id=str(tag.pk))

        owner = owners_of(media)[0]

        assert owner.name == "Summer"
        assert owner.title_key is None
        assert owner.slug == "summer"
        assert owner.module == "tags"
        assert owner.edit == f"/admin/tags/{tag.pk}/edit/"

    def test_to_dict(self, media, article):
        """The serialized shape uses titleKey and the model label."""
        Mediable.attach(media, article)

        data = owners_of(media)[0].to_dict()

        assert data == {
            "id": article.pk,
            "slug": "hello",
            "name": "Hello",
            "titleKey": "title",
            "module": "articles",
            "edit": f"/admin/content/articles/{article.pk}/edit/",
            "model": "content.Article",
        }

    def test_owner_stored_under_model_label(self, media, article):
        """Rows tagged with the model label resolve too."""
        MediableFactory(media=media, mediable_type="content.Article", mediable_id=str(article.pk))

        owners = owners_of(media)

        assert [owner.model for owner in owners] == [article]

    def test_custom_registry_and_loader(self):
        """Non-model owners resolve through any EntityLoader."""
        registry = OwnerTypeRegistry({"posts": DictLoader({3: BlogPost(3, "Launch")})})
        projector = OwnerProjector(
            registry=registry,
            routes=RouteBuilder(admin_path="cms"),
            route_prefixes={"blogPosts": "blog"},
        )

        owners = projector.project([OwnershipRecord(media_id=1, owner_type="posts", owner_id=3)])

        assert len(owners) == 1
        assert owners[0].id == 3
        assert owners[0].name == "Launch"
        assert owners[0].title_key == "headline"
        assert owners[0].module == "blogPosts"
        assert owners[0].edit == "/cms/blog/blogPosts/3/edit/"
        assert owners[0].to_dict()["model"] == "BlogPost"


# =============================================================================
# Blocks
# =============================================================================


@pytest.mark.django_db
class TestBlockOwners:
    """Tests for media placed in blocks."""

    def test_block_resolves_to_parent(self, media, article):
        """Media in a block is listed as used by the block's parent."""
        block = BlockFactory(parent=article)
        Mediable.attach(media, block, role="image")

        owners = owners_of(media)

        assert len(owners) == 1
        assert owners[0].model == article
        assert owners[0].module == "articles"
        assert owners[0].name == "Hello"

    def test_block_on_page(self, media, page):
        """Block parents of any type are supported."""
        Mediable.attach(media, BlockFactory(parent=page))

        assert owners_of(media)[0].model == page

    def test_block_without_parent_is_dropped(self, media, unresolved):
        """Blocks whose parent no longer exists are skipped."""
        block = BlockFactory(blockable_type="articles", blockable_id="999999")
        Mediable.attach(media, block)

        assert owners_of(media) == []
        assert [reason for _, reason in unresolved] == [REASON_MISSING_PARENT]

    def test_block_with_unknown_parent_type_is_dropped(self, media, unresolved):
        """Blocks whose parent type can't be resolved are skipped."""
        block = BlockFactory(blockable_type="unknown.Thing", blockable_id="1")
        Mediable.attach(media, block)

        assert owners_of(media) == []
        assert [reason for _, reason in unresolved] == [REASON_MISSING_PARENT]


# =============================================================================
# Dropped records
# =============================================================================


@pytest.mark.django_db
class TestDroppedRecords:
    """Tests for records that can't be resolved."""

    def test_missing_entity(self, media, unresolved):
        """Rows pointing at deleted owners are skipped."""
        MediableFactory(media=media, mediable_type="articles", mediable_id="999999")

        assert owners_of(media) == []
        assert len(unresolved) == 1
        record, reason = unresolved[0]
        assert reason == REASON_MISSING_ENTITY
        assert record.owner_type == "articles"
        assert record.owner_id == "999999"
        assert record.media_id == media.pk

    def test_deleted_owner(self, media, article, unresolved):
        """Deleting the owner leaves a row that is skipped."""
        Mediable.attach(media, article)
        article.delete()

        assert owners_of(media) == []
        assert [reason for _, reason in unresolved] == [REASON_MISSING_ENTITY]

    @pytest.mark.parametrize("owner_type", ["unknown.Thing", "App\\Models\\Article", ""])
    def test_unresolvable_type(self, media, unresolved, owner_type):
        """Rows with an unknown type tag are skipped."""
        MediableFactory(media=media, mediable_type=owner_type, mediable_id="1")

        assert owners_of(media) == []
        assert [reason for _, reason in unresolved] == [REASON_UNRESOLVABLE_TYPE]

    def test_uncoercible_id(self, media, unresolved):
        """Ids that can't match the owner's key count as missing."""
        MediableFactory(media=media, mediable_type="articles", mediable_id="not-a-number")

        assert owners_of(media) == []
        assert [reason for _, reason in unresolved] == [REASON_MISSING_ENTITY]

    def test_valid_rows_survive_invalid_ones(self, media, article, page, unresolved):
        """Dropping a record never affects the others."""
        Mediable.attach(media, article)
        MediableFactory(media=media, mediable_type="unknown.Thing", mediable_id="1")
        MediableFactory(media=media, mediable_type="articles", mediable_id="999999")
        Mediable.attach(media, page)

        owners = owners_of(media)

        assert {owner.model for owner in owners} == {article, page}
        assert len(unresolved) == 2


# =============================================================================
# Ordering and de-duplication
# =============================================================================


class TestProjectOrdering:
    """Tests for project() ordering and uniqueness."""

    @pytest.fixture
    def projector(self):
        posts = {1: BlogPost(1, "One"), 2: BlogPost(2, "Two")}
        return OwnerProjector(
            registry=OwnerTypeRegistry({"posts": DictLoader(posts)}),
            routes=RouteBuilder(admin_path="admin"),
            route_prefixes={},
        )

    def records(self, *owner_ids):
        return [
            OwnershipRecord(media_id=9, owner_type="posts", owner_id=owner_id)
            for owner_id in owner_ids
        ]

    def test_keeps_record_order(self, projector):
        """Descriptors follow the record order."""
        owners = projector.project(self.records(2, 1))

        assert [owner.id for owner in owners] == [2, 1]

    def test_duplicates_kept_by_default(self, projector):
        """Each placement yields a descriptor."""
        owners = projector.project(self.records(1, 2, 1))

        assert [owner.id for owner in owners] == [1, 2, 1]

    def test_unique(self, projector):
        """unique=True keeps the first descriptor per owner."""
        owners = projector.project(self.records(1, 2, 1), unique=True)

        assert [owner.id for owner in owners] == [1, 2]

    def test_empty(self, projector):
        """No records, no owners."""
        assert projector.project([]) == []


@pytest.mark.django_db
class TestOwnerDetails:
    """Tests for owners listed through the media asset."""

    def test_article_used_twice_is_listed_once(self, media, article):
        """An owner using the media in several places is listed once."""
        Mediable.attach(media, article, role="cover")
        Mediable.attach(media, BlockFactory(parent=article), role="image")

        owners = media.get_owner_details()

        assert len(owners) == 1
        assert isinstance(owners[0], OwnerDescriptor)
        assert owners[0].id == article.pk
        assert owners[0].name == "Hello"

    def test_several_articles(self, media):
        """Different owners are all listed."""
        first, second = ArticleFactory.create_batch(2)
        Mediable.attach(media, first)
        Mediable.attach(media, second)

        assert {owner.id for owner in media.get_owner_details()} == {first.pk, second.pk}
