"""Unit tests for the category handlers, run through the message bus."""

import pytest

from inkpost.interfaces.blog import errors
from inkpost.interfaces.unsettable import UNSET
from inkpost.service_layer import commands, queries
from tests.fixtures.datagen import EPOCH
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class TestCreateCategory(HandlerTestBase):
    """Tests for the create_category handler."""

    def test_derives_slug_from_name(self):
        category = self.add_category("Web Development")
        assert category.slug == "web-development"
        assert category.name == "Web Development"

    def test_commits(self):
        self.add_category("News")
        self.assert_committed()

    def test_stamps_created_at_from_clock(self):
        category = self.add_category("News")
        assert category.created_at == EPOCH

    def test_keeps_description(self):
        category = self.add_category("News", description="Daily news")
        assert category.description == "Daily news"

    def test_same_name_conflicts(self):
        self.add_category("Web Development")
        self.reset_committed()

        with pytest.raises(errors.SlugConflictError) as excinfo:
            self.add_category("Web Development")

        assert excinfo.value.slug == "web-development"
        assert "already exists" in str(excinfo.value)
        self.assert_not_committed()

    def test_names_with_same_slug_conflict(self):
        self.add_category("Web Development")
        with pytest.raises(errors.ConflictError):
            self.add_category("web   development!")


class TestUpdateCategory(HandlerTestBase):
    """Tests for the update_category handler."""

    def _seed_bus(self, request) -> None:
        self.news = self.add_category("News", description="Daily news")
        self.tech = self.add_category("Tech")

    def test_rename_recomputes_slug(self):
        updated = self.bus.handle(
            commands.UpdateCategory(category_id=self.news.id, name="Breaking News")
        )

        assert updated.name == "Breaking News"
        assert updated.slug == "breaking-news"
        assert self.uow.categories.get_by_slug("news") is None
        self.assert_committed()

    def test_rename_keeps_post_assignments(self):
        post = self.add_post("Hello", category_ids=(self.news.id,))

        self.bus.handle(
            commands.UpdateCategory(category_id=self.news.id, name="Breaking News")
        )

        refs = self.uow.posts.categories_of(post.post.id)
        assert [r.slug for r in refs] == ["breaking-news"]

    def test_omitted_fields_keep_their_values(self):
        updated = self.bus.handle(
            commands.UpdateCategory(category_id=self.news.id, name="Headlines")
        )
        assert updated.description == "Daily news"

    def test_description_can_be_cleared(self):
        updated = self.bus.handle(
            commands.UpdateCategory(category_id=self.news.id, description=None)
        )
        assert updated.description is None
        assert updated.name == "News"

    def test_no_changes_is_a_noop(self):
        result = self.bus.handle(
            commands.UpdateCategory(
                category_id=self.news.id, name="News", description=UNSET
            )
        )
        assert result == self.news
        self.assert_not_committed()

    def test_case_only_rename_keeps_slug(self):
        updated = self.bus.handle(
            commands.UpdateCategory(category_id=self.news.id, name="NEWS")
        )
        assert updated.name == "NEWS"
        assert updated.slug == "news"

    def test_rename_onto_other_slug_conflicts(self):
        with pytest.raises(errors.SlugConflictError):
            self.bus.handle(
                commands.UpdateCategory(category_id=self.news.id, name="tech")
            )
        self.assert_not_committed()
        assert self.uow.categories.get(self.news.id).name == "News"

    def test_missing_category(self):
        with pytest.raises(errors.CategoryNotFoundError):
            self.bus.handle(commands.UpdateCategory(category_id=999, name="X"))


class TestDeleteCategory(HandlerTestBase):
    """Tests for the delete_category handler."""

    def _seed_bus(self, request) -> None:
        self.news = self.add_category("News")

    def test_unused_category_is_deleted(self):
        result = self.bus.handle(commands.DeleteCategory(category_id=self.news.id))

        assert result.success is True
        assert result.id == self.news.id
        assert self.bus.handle(queries.ListCategories()) == []
        self.assert_committed()

    def test_used_category_is_refused(self):
        self.add_post("One", category_ids=(self.news.id,))
        self.add_post("Two", category_ids=(self.news.id,))
        self.reset_committed()

        with pytest.raises(errors.CategoryInUseError) as excinfo:
            self.bus.handle(commands.DeleteCategory(category_id=self.news.id))

        assert excinfo.value.post_count == 2
        assert str(excinfo.value) == (
            "Cannot delete category that is assigned to 2 post(s)"
        )
        assert self.uow.categories.get(self.news.id) is not None
        self.assert_not_committed()

    def test_missing_category(self):
        with pytest.raises(errors.CategoryNotFoundError):
            self.bus.handle(commands.DeleteCategory(category_id=404))


class TestCategoryQueries(HandlerTestBase):
    """Tests for the category read handlers."""

    def _seed_bus(self, request) -> None:
        self.zebra = self.add_category("Zebra")
        self.apple = self.add_category("Apple")
        self.add_post("Fruit", category_ids=(self.apple.id,))

    def test_list_is_ordered_by_name_with_counts(self):
        listed = self.bus.handle(queries.ListCategories())

        assert [c.category.name for c in listed] == ["Apple", "Zebra"]
        assert [c.post_count for c in listed] == [1, 0]

    def test_get_by_id(self):
        found = self.bus.handle(queries.GetCategoryById(category_id=self.apple.id))
        assert found.category == self.apple
        assert found.post_count == 1

    def test_get_by_slug(self):
        found = self.bus.handle(queries.GetCategoryBySlug(slug="zebra"))
        assert found.category == self.zebra
        assert found.post_count == 0

    @pytest.mark.parametrize(
        "query",
        [queries.GetCategoryById(category_id=999), queries.GetCategoryBySlug(slug="x")],
    )
    def test_missing(self, query):
        with pytest.raises(errors.CategoryNotFoundError):
            self.bus.handle(query)

    def test_queries_do_not_commit(self):
        self.bus.handle(queries.ListCategories())
        self.assert_not_committed()
