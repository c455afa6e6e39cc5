"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

from pathlib import Path

from solidctl.domain.animals import ANIMAL_REGISTRY, create_animal
from solidctl.plugins.manager import PluginManager

# -- Plugin source code used in tests ------------------------------------------

_VALID_PLUGIN_SRC = """\
import pluggy

from solidctl.domain.animals import Animal

hookimpl = pluggy.HookimplMarker("solidctl")


class Goat(Animal):
    kind = "goat"

    def speak(self) -> str:
        return "Baa"


class FarmPlugin:
    \"\"\"Adds a goat.\"\"\"

    @hookimpl
    def register_animals(self):
        return {"goat": Goat}
"""

_SYNTAX_ERROR_SRC = """\
def broken(
    # missing closing paren and colon
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    \"\"\"A class with no hookimpl-decorated methods.\"\"\"
    def hello(self) -> str:
        return "world"
"""

_BAD_RETURN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("solidctl")


class ListPlugin:
    @hookimpl
    def register_shapes(self):
        return ["not", "a", "dict"]
"""

_TWO_CLASSES_SRC = """\
import pluggy

from solidctl.domain.animals import Animal

hookimpl = pluggy.HookimplMarker("solidctl")


class Cow(Animal):
    kind = "cow"

    def speak(self) -> str:
        return "Moo"


class Pig(Animal):
    kind = "pig"

    def speak(self) -> str:
        return "Oink"


class CowPlugin:
    @hookimpl
    def register_animals(self):
        return {"cow": Cow}


class PigPlugin:
    @hookimpl
    def register_animals(self):
        return {"pig": Pig}
"""

_FAILING_INIT_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("solidctl")


class NeedsArgs:
    def __init__(self, required):
        self.required = required

    @hookimpl
    def register_shapes(self):
        return {}
"""


class TestLocalDiscovery:
    def test_discovers_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "farm.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "solidctl_local_plugin_farm" in names
        assert create_animal("goat").speak() == "Baa"

    def test_skips_bad_plugin_gracefully(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")
        (tmp_path / "farm.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "solidctl_local_plugin_broken" not in names
        assert "solidctl_local_plugin_farm" in names

    def test_ignores_classes_without_hooks(self, tmp_path: Path) -> None:
        (tmp_path / "plain.py").write_text(_NO_HOOKS_SRC, encoding="utf-8")

        pm = PluginManager()
        assert "solidctl_local_plugin_plain" not in pm.discover_and_load(local_dir=tmp_path)

    def test_skips_underscore_files(self, tmp_path: Path) -> None:
        (tmp_path / "_private.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert "goat" not in ANIMAL_REGISTRY

    def test_non_dict_return_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "listy.py").write_text(_BAD_RETURN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "solidctl_local_plugin_listy" in names

    def test_missing_directory(self, tmp_path: Path) -> None:
        pm = PluginManager()
        assert pm.discover_and_load(local_dir=tmp_path / "nope") == []

    def test_every_class_in_one_file_is_registered(self, tmp_path: Path) -> None:
        (tmp_path / "barn.py").write_text(_TWO_CLASSES_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "solidctl_local_plugin_barn" in names
        assert "solidctl_local_plugin_barn.PigPlugin" in names
        assert create_animal("cow").speak() == "Moo"
        assert create_animal("pig").speak() == "Oink"
        assert pm.warnings == []

    def test_class_that_cannot_be_built_is_a_warning(self, tmp_path: Path) -> None:
        (tmp_path / "needy.py").write_text(_FAILING_INIT_SRC, encoding="utf-8")
        (tmp_path / "farm.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "solidctl_local_plugin_farm" in names
        assert "solidctl_local_plugin_needy" not in names
        assert any("NeedsArgs" in w for w in pm.warnings)

    def test_broken_file_is_a_warning(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)

        assert len(pm.warnings) == 1
        assert "broken.py" in pm.warnings[0]
