"""Tests for the MusicalEntity base: links, introspection and generic map."""

import pytest
from attrs import define

from tunelink.domain.entities import MusicalEntity
from tunelink.domain.interfaces import MusicalEntityInterface


@define(slots=True)
class PlainEntity(MusicalEntity):
    """Concrete entity keeping the base type tag."""

    title: str = "Untitled"

    def get_title(self) -> str:
        return self.title

    def get_artist(self) -> str:
        return "Unknown Artist"


@pytest.fixture
def entity():
    return PlainEntity()


class TestConstruction:
    """Test the initial state of an entity."""

    def test_new_entity_is_empty(self, entity):
        """Test a fresh entity has no links, no metadata and is not introspected."""
        assert entity.count_links() == 0
        assert entity.get_links() == []
        assert entity.get_metadata() == {}
        assert entity.is_introspected() is False

    def test_base_cannot_be_instantiated(self):
        """Test the base class stays abstract."""
        with pytest.raises(TypeError):
            MusicalEntity()

    def test_entities_do_not_share_state(self):
        """Test each instance gets its own link list and metadata."""
        first, second = PlainEntity(), PlainEntity()
        first.add_link("https://a").set_introspected({"k": "v"})

        assert second.count_links() == 0
        assert second.get_metadata() == {}

    def test_satisfies_interface(self, entity):
        """Test entities satisfy the runtime-checkable protocol."""
        assert isinstance(entity, MusicalEntityInterface)


class TestLinks:
    """Test link collection behavior."""

    def test_add_link_keeps_call_order(self, entity):
        """Test links come back in the order they were added."""
        for link in ["https://c", "https://a", "https://b"]:
            entity.add_link(link)

        assert entity.count_links() == 3
        assert entity.get_links() == ["https://c", "https://a", "https://b"]

    def test_duplicates_are_kept(self, entity):
        """Test the same link can be added twice."""
        entity.add_link("https://a").add_link("https://a")

        assert entity.count_links() == 2

    def test_add_links_matches_repeated_add_link(self):
        """Test bulk addition equals adding links one by one."""
        bulk = PlainEntity().add_link("https://first").add_links(["a", "b", "c"])
        single = (
            PlainEntity()
            .add_link("https://first")
            .add_link("a")
            .add_link("b")
            .add_link("c")
        )

        assert bulk.get_links() == single.get_links()

    def test_add_links_accepts_any_iterable(self, entity):
        """Test generators are consumed in order."""
        entity.add_links(f"https://{i}" for i in range(3))

        assert entity.get_links() == ["https://0", "https://1", "https://2"]

    def test_mutators_return_same_instance(self, entity):
        """Test fluent mutators return the receiver."""
        assert entity.add_link("https://a") is entity
        assert entity.add_links(["https://b"]) is entity
        assert entity.set_introspected() is entity

    def test_links_copy_is_detached(self, entity):
        """Test later additions do not show up in an earlier copy."""
        entity.add_link("https://a")
        links = entity.get_links()
        entity.add_link("https://b")

        assert links == ["https://a"]

    def test_mutating_returned_links_leaves_entity_unchanged(self, entity):
        """Test the returned list cannot be used to change the entity."""
        entity.add_links(["https://a", "https://b"])
        links = entity.get_links()
        links.append("https://c")
        links[0] = "https://changed"
        links.clear()

        assert entity.get_links() == ["https://a", "https://b"]
        assert entity.count_links() == 2

    def test_add_links_rejects_single_string(self, entity):
        """Test a lone string is not split into one link per character."""
        with pytest.raises(TypeError, match="not a string"):
            entity.add_links("http://a")

        assert entity.count_links() == 0


class TestIntrospection:
    """Test the introspection flag and metadata replacement."""

    def test_set_introspected_with_metadata(self, entity):
        """Test metadata is stored and the flag raised."""
        entity.set_introspected({"artist": "X", "genre": "rock"})

        assert entity.is_introspected() is True
        assert entity.get_metadata() == {"artist": "X", "genre": "rock"}

    def test_set_introspected_replaces_metadata(self, entity):
        """Test a second mapping overwrites instead of merging."""
        entity.set_introspected({"artist": "X", "genre": "rock"})
        entity.set_introspected({"label": "XL"})

        assert entity.get_metadata() == {"label": "XL"}

    def test_set_introspected_without_metadata_keeps_it(self, entity):
        """Test omitting metadata leaves the previous mapping untouched."""
        entity.set_introspected({"artist": "X"})
        entity.set_introspected()

        assert entity.is_introspected() is True
        assert entity.get_metadata() == {"artist": "X"}

    def test_set_introspected_without_metadata_on_fresh_entity(self, entity):
        """Test a bare call leaves metadata empty."""
        entity.set_introspected()

        assert entity.is_introspected() is True
        assert entity.get_metadata() == {}

    def test_empty_mapping_replaces_metadata(self, entity):
        """Test an explicit empty mapping is still a replacement."""
        entity.set_introspected({"artist": "X"})
        entity.set_introspected({})

        assert entity.get_metadata() == {}

    def test_metadata_is_copied(self, entity):
        """Test neither the input nor the output mapping aliases entity state."""
        source = {"artist": "X"}
        entity.set_introspected(source)
        source["artist"] = "Y"
        entity.get_metadata()["artist"] = "Z"

        assert entity.get_metadata() == {"artist": "X"}

    def test_introspect_uses_title_markers(self):
        """Test local introspection reads the title."""
        entity = PlainEntity(title="Song (feat. Guest) [Live]").introspect()

        assert entity.is_introspected() is True
        assert entity.get_metadata() == {"featuring": "Guest", "version": "live"}


class TestGenericMap:
    """Test the generic map representation."""

    def test_base_type_tag(self, entity):
        """Test the base tag is reported."""
        assert entity.to_dict() == {"type": "musical_entity"}
        assert entity.get_type() == "musical_entity"

    def test_safe_title(self):
        """Test the safe title strips version suffixes."""
        assert PlainEntity(title="Song - Radio Edit").get_safe_title() == "Song"

    def test_example_scenario(self, entity):
        """Test links then introspection end to end."""
        entity.add_links(["http://a", "http://b"])
        assert entity.count_links() == 2
        assert entity.get_links() == ["http://a", "http://b"]

        entity.set_introspected({"artist": "X"})
        assert entity.is_introspected() is True
        assert entity.get_metadata() == {"artist": "X"}
