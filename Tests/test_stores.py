"""Tests for EntityRegistry, KnowledgeBaseStore and IntegrationToggleSet."""

import pytest

from agents.default_agents import AVATAR_OPTIONS, DEFAULT_TEAM
from errors import EmptyContent, InvalidAvatar, InvalidKey, NotFound
from models.agent import Agent, TeamMember
from models.integration import INTEGRATION_ORDER
from registry import EntityRegistry
from storage import IntegrationToggleSet, KnowledgeBaseStore


class TestEntityRegistry:
    """Tests for the agent catalog and team roster."""

    def test_seed_catalog(self):
        """Default registry holds agents 1..3 in order."""
        reg = EntityRegistry()
        assert [a.id for a in reg.list_agents()] == [1, 2, 3]
        assert reg.get_agent(1).voice == "calm"

    def test_get_missing_agent(self):
        """Unknown ids raise NotFound."""
        with pytest.raises(NotFound):
            EntityRegistry().get_agent(7)

    def test_update_name_and_avatar(self):
        """Both fields can be patched together."""
        reg = EntityRegistry()
        updated = reg.update_agent(1, name="Bot", avatar=AVATAR_OPTIONS[2])
        assert updated.name == "Bot"
        assert reg.get_agent(1).avatar == AVATAR_OPTIONS[2]
        assert reg.get_agent(1).voice == "calm"

    def test_invalid_avatar_leaves_agent_untouched(self):
        """A rejected patch writes nothing."""
        reg = EntityRegistry()
        with pytest.raises(InvalidAvatar):
            reg.update_agent(2, name="Changed", avatar="SB")
        assert reg.get_agent(2).name == "AgileMate"

    def test_blank_name_rejected(self):
        """Agents always keep a display name."""
        with pytest.raises(EmptyContent):
            EntityRegistry().update_agent(1, name="  ")

    def test_returned_agents_are_copies(self):
        """Editing a returned agent does not change the registry."""
        reg = EntityRegistry()
        reg.get_agent(1).name = "Other"
        assert reg.get_agent(1).name == "ScrumBot"

    def test_reset_restores_seed(self):
        """reset() undoes edits."""
        reg = EntityRegistry()
        reg.update_agent(3, name="Edited")
        reg.reset()
        assert reg.get_agent(3).name == "SprintMaster"

    def test_custom_catalog(self):
        """A registry can be built from a custom catalog and avatar set."""
        reg = EntityRegistry(
            agents=[Agent(id=10, name="Solo", avatar="a", voice="calm")],
            team=[TeamMember(id=1, name="Dee", role="Dev", contribution="Low")],
            avatar_options=["a", "b"],
        )
        assert reg.update_agent(10, avatar="b").avatar == "b"
        assert reg.team_members()[0].contribution_rank == 0

    def test_team_is_read_only(self):
        """Team members are frozen."""
        reg = EntityRegistry()
        assert reg.team_members() == DEFAULT_TEAM
        with pytest.raises(Exception):
            reg.team_members()[0].name = "Mallory"


class TestKnowledgeBaseStore:
    """Tests for the ordered knowledge base."""

    def test_seed_content(self):
        """The store starts with the two seed items."""
        store = KnowledgeBaseStore()
        assert [(i.id, i.type) for i in store.list_items()] == [(1, "text"), (2, "link")]

    def test_add_assigns_fresh_ids(self):
        """New items get ids after the seed and keep insertion order."""
        store = KnowledgeBaseStore()
        a = store.add("pdf", "guide.pdf")
        b = store.add("text", "  notes  ")
        assert (a.id, b.id) == (3, 4)
        assert b.content == "notes"
        assert store.list_items()[-2:] == [a, b]

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_content(self, content):
        """Blank content raises EmptyContent."""
        with pytest.raises(EmptyContent):
            KnowledgeBaseStore().add("text", content)

    def test_unknown_type(self):
        """Unknown types raise InvalidKey."""
        with pytest.raises(InvalidKey):
            KnowledgeBaseStore().add("audio", "track.mp3")

    def test_remove(self):
        """remove() reports whether anything was removed."""
        store = KnowledgeBaseStore()
        assert store.remove(1) is True
        assert store.remove(1) is False
        assert [i.id for i in store.list_items()] == [2]

    def test_ids_not_reused_after_remove(self):
        """Removing the newest item does not free its id."""
        store = KnowledgeBaseStore(seed=[])
        first = store.add("text", "a")
        store.remove(first.id)
        assert store.add("text", "b").id != first.id

    def test_empty_store_is_falsy(self):
        """An empty store has no length."""
        store = KnowledgeBaseStore(seed=[])
        assert len(store) == 0
        assert not store


class TestIntegrationToggleSet:
    """Tests for the fixed-key toggle map."""

    def test_all_keys_start_false(self):
        """Every integration starts disconnected, in fixed order."""
        toggles = IntegrationToggleSet()
        assert toggles.items() == [(k, False) for k in INTEGRATION_ORDER]
        assert list(toggles.snapshot()) == ["jira", "github", "slack", "teams", "calendar"]
        assert toggles.any_connected() is False

    def test_set_and_get(self):
        """Values toggle, keys stay fixed."""
        toggles = IntegrationToggleSet()
        toggles.set("calendar", True)
        assert toggles.get("calendar") is True
        assert toggles.any_connected() is True
        assert len(toggles.snapshot()) == 5

    @pytest.mark.parametrize("key", ["trello", "", "JIRA"])
    def test_unknown_keys(self, key):
        """Unknown keys raise InvalidKey on read and write."""
        toggles = IntegrationToggleSet()
        with pytest.raises(InvalidKey):
            toggles.set(key, True)
        with pytest.raises(InvalidKey):
            toggles.get(key)
        assert len(toggles.snapshot()) == 5

    def test_reset(self):
        """reset() disconnects everything."""
        toggles = IntegrationToggleSet()
        toggles.set("jira", True)
        toggles.reset()
        assert toggles.any_connected() is False
