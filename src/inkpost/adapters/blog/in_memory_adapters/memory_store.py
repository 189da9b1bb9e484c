"""In-memory shared data store for blog adapters."""

from dataclasses import dataclass, field

from inkpost.interfaces.blog.records import Category, Post


@dataclass(slots=True)
class InMemoryBlogData:
    """Shared in-memory backing store for the in-memory blog repositories.

    A single shared instance should be passed to both repositories so the
    association rows, the delete guard and the cascade see the same data.
    Ids are handed out from per-table counters and never reused.
    """

    # keyed by id
    categories: dict[int, Category] = field(default_factory=dict)
    posts: dict[int, Post] = field(default_factory=dict)

    # (post_id, category_id) facts
    post_categories: set[tuple[int, int]] = field(default_factory=set)

    last_category_id: int = 0
    last_post_id: int = 0

    def next_category_id(self) -> int:
        self.last_category_id += 1
        return self.last_category_id

    def next_post_id(self) -> int:
        self.last_post_id += 1
        return self.last_post_id
