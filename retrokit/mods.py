"""Mod discovery, settings and file redirection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from retrokit.ini import IniParser

log = logging.getLogger(__name__)

_REPLACEABLE_FOLDERS = ("Data", "Scripts", "Videos")
_SCRIPT_PREFIX = "Data/Scripts/"


def resolve_path(given: Union[str, os.PathLike]) -> Path:
    """Find an existing entry matching the path's final name, ignoring case."""
    path = Path(given)
    if not path.is_absolute():
        path = Path.cwd() / path
    wanted = path.name.lower()
    try:
        for entry in path.parent.iterdir():
            if entry.name.lower() == wanted:
                return entry
    except OSError:
        pass
    return path


def _strip_spaces(name: str) -> str:
    return name.replace(" ", "")


def get_scene_id(stage_names: Sequence[str], scene_name: str) -> int:
    """Index of the stage whose name matches, ignoring spaces and case; -1 if none."""
    wanted = _strip_spaces(scene_name).lower()
    return next(
        (i for i, name in enumerate(stage_names) if _strip_spaces(name).lower() == wanted),
        -1,
    )


@dataclass
class ModInfo:
    """Metadata and replacement files of one mod."""

    name: str = ""
    desc: str = ""
    author: str = ""
    version: str = ""
    file_map: dict[str, str] = field(default_factory=dict)
    folder: str = ""
    use_scripts: bool = False
    disable_focus_pause: int = 0
    redirect_save: bool = False
    disable_save_ini_override: bool = False
    save_path: str = ""
    active: bool = False


@dataclass
class ModSettings:
    """Engine settings that result from the active mods."""

    force_use_scripts: bool = False
    disable_focus_pause: int = 0
    redirect_save: bool = False
    disable_save_ini_override: bool = False
    save_path: str = ""


class ModManager:
    """Loads the mods below a base path and tracks which are active."""

    def __init__(
        self,
        base_path: Union[str, os.PathLike] = "",
        force_use_scripts: bool = False,
        disable_focus_pause: int = 0,
    ) -> None:
        self.base_path = Path(base_path)
        self.force_use_scripts_config = force_use_scripts
        self.disable_focus_pause_config = disable_focus_pause
        self.mod_list: list[ModInfo] = []
        self.active_mod = -1
        self.settings = self._base_settings()

    def _base_settings(self) -> ModSettings:
        return ModSettings(
            force_use_scripts=self.force_use_scripts_config,
            disable_focus_pause=self.disable_focus_pause_config,
        )

    @property
    def mods_path(self) -> Path:
        return resolve_path(self.base_path / "mods")

    def load_mod(self, folder: str, active: bool) -> Optional[ModInfo]:
        """Read a mod's mod.ini; None if the folder holds none."""
        ini_path = self.mods_path / folder / "mod.ini"
        if not ini_path.is_file():
            return None
        mod_settings = IniParser(ini_path)
        info = ModInfo(
            name=mod_settings.get_string("", "Name") or "Unnamed Mod",
            desc=mod_settings.get_string("", "Description") or "",
            author=mod_settings.get_string("", "Author") or "Unknown Author",
            version=mod_settings.get_string("", "Version") or "1.0.0",
            folder=folder,
            active=active,
        )
        self.scan_mod_folder(info)

        info.use_scripts = bool(mod_settings.get_bool("", "TxtScripts"))
        if info.use_scripts and info.active:
            self.settings.force_use_scripts = True

        info.disable_focus_pause = mod_settings.get_integer("", "DisableFocusPause") or 0
        if info.disable_focus_pause and info.active:
            self.settings.disable_focus_pause |= info.disable_focus_pause

        info.redirect_save = bool(mod_settings.get_bool("", "RedirectSaveRAM"))
        if info.redirect_save:
            info.save_path = f"mods/{folder}/"

        info.disable_save_ini_override = bool(mod_settings.get_bool("", "DisableSaveIniOverride"))
        if info.disable_save_ini_override and info.active:
            self.settings.disable_save_ini_override = True
        return info

    def scan_mod_folder(self, info: ModInfo) -> None:
        """Map every replacement file of a mod by its lower-case game path."""
        mod_dir = self.mods_path / info.folder
        mod_dir_text = str(mod_dir)
        for folder in _REPLACEABLE_FOLDERS:
            root = resolve_path(mod_dir / folder)
            if not root.is_dir():
                continue
            tokens = (f"{folder}/", f"{folder}\\", f"{folder.lower()}/", f"{folder.lower()}\\")
            try:
                files = sorted(p for p in root.rglob("*") if p.is_file())
            except OSError as error:
                log.warning("%s folder scanning error: %s", folder, error)
                continue
            for file_path in files:
                full = str(file_path)
                start = len(mod_dir_text)
                position = next(
                    (pos for pos in (full.find(t, start) for t in tokens) if pos >= 0),
                    -1,
                )
                if position < 0:
                    continue
                game_path = full[position:].replace("\\", "/").lower()
                info.file_map.setdefault(game_path, full)

    def init_mods(self) -> list[ModInfo]:
        """Discover mods: those in modconfig.ini first, in its order, then the rest."""
        self.mod_list = []
        self.settings = self._base_settings()
        mods_path = self.mods_path
        if mods_path.is_dir():
            config_path = mods_path / "modconfig.ini"
            if config_path.is_file():
                config = IniParser(config_path)
                for item in config.items:
                    active = bool(config.get_bool("mods", item.key))
                    info = self.load_mod(item.key, active)
                    if info is not None:
                        self.mod_list.append(info)
            try:
                folders = sorted(p.name for p in mods_path.iterdir() if p.is_dir())
            except OSError as error:
                log.warning("Mods folder scanning error: %s", error)
                folders = []
            known = {info.folder for info in self.mod_list}
            for folder in folders:
                if folder in known:
                    continue
                info = self.load_mod(folder, False)
                if info is not None:
                    self.mod_list.append(info)
                    known.add(folder)
        self.apply_settings()
        return self.mod_list

    def apply_settings(self) -> ModSettings:
        """Recompute the engine settings from the configured values and active mods."""
        settings = self._base_settings()
        for info in self.mod_list:
            if not info.active:
                continue
            if info.use_scripts:
                settings.force_use_scripts = True
            if info.disable_focus_pause:
                settings.disable_focus_pause |= info.disable_focus_pause
            if info.redirect_save:
                settings.save_path = info.save_path
                settings.redirect_save = True
            if info.disable_save_ini_override:
                settings.disable_save_ini_override = True
        self.settings = settings
        return settings

    def save_mods(self) -> None:
        """Write each mod's active flag to modconfig.ini, in list order."""
        mods_path = self.mods_path
        if not mods_path.is_dir():
            return
        config = IniParser()
        for info in self.mod_list:
            config.set_bool("mods", info.folder, info.active)
        config.write(mods_path / "modconfig.ini")

    def resolve_file(self, file_path: str) -> Optional[str]:
        """Where an active mod redirects a game file to, or None to use the game's own."""
        lowered = file_path.lower()
        candidates = self.mod_list[self.active_mod:self.active_mod + 1] if self.active_mod != -1 else self.mod_list
        for info in candidates:
            if info.active and lowered in info.file_map:
                return info.file_map[lowered]
        if (
            self.settings.force_use_scripts
            and file_path.startswith(_SCRIPT_PREFIX)
            and file_path.endswith("txt")
        ):
            return file_path[len("Data/"):]
        return None