# -*- coding: utf-8 -*-

"""
Arc scorer configuration
"""

import configparser
import os
from typing import Mapping, Any, Dict, Tuple

from arcparse import scoring
from arcparse.exceptions import ConfigError
from arcparse.tokens import UNKNOWN_POS, normalize_pos

__author__ = 'ArcParse Contributors'
__all__ = [
    'ScorerConfig',
]


AFFINITY_SECTION_PREFIX = 'Affinity:'


class ScorerConfig:
    """Arc scorer configuration, read from an INI file.

    The [Scoring] section holds the scalar settings (Distance Decay, Baseline, Root Baseline,
    Replace Defaults). [Root Affinities] maps dependent tags to ROOT arc scores, and each
    [Affinity: <head tag>] section maps dependent tags to a "left, right" pair of affinities.
    Unless Replace Defaults is set, the file's entries are layered over the built-in tables.
    """

    def __init__(self, config_file_path: str, defaults: Mapping[str, Any] = None):
        config_file_path = os.path.abspath(os.path.expanduser(config_file_path))

        if not os.path.isfile(config_file_path):
            raise FileNotFoundError(config_file_path)

        self._config_file_path = config_file_path

        if defaults is None:
            defaults = {}
        else:
            defaults = dict(defaults)
        for option, value in (('Distance Decay', scoring.DEFAULT_DISTANCE_DECAY),
                              ('Baseline', scoring.DEFAULT_BASELINE),
                              ('Root Baseline', scoring.DEFAULT_ROOT_BASELINE),
                              ('Replace Defaults', '0')):
            if option not in defaults:
                defaults[option] = value

        config_parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
        try:
            config_parser.read(self._config_file_path, encoding='utf-8')
        except configparser.Error as exc:
            raise ConfigError(str(exc), self._config_file_path) from exc

        # Scoring
        self._distance_decay = self._get_float(config_parser, 'Scoring', 'Distance Decay',
                                               defaults['Distance Decay'])
        self._baseline = self._get_float(config_parser, 'Scoring', 'Baseline',
                                         defaults['Baseline'])
        self._root_baseline = self._get_float(config_parser, 'Scoring', 'Root Baseline',
                                              defaults['Root Baseline'])
        try:
            if config_parser.has_option('Scoring', 'Replace Defaults'):
                replace_defaults = config_parser.getboolean('Scoring', 'Replace Defaults')
            else:
                replace_defaults = defaults['Replace Defaults']
                if isinstance(replace_defaults, str):
                    replace_defaults = config_parser.BOOLEAN_STATES[replace_defaults.lower()]
        except (KeyError, ValueError) as exc:
            raise ConfigError("Expected a boolean value", self._config_file_path, 'Scoring',
                              'Replace Defaults') from exc

        if replace_defaults:
            root_affinities = {}  # type: Dict[str, float]
            affinities = {}  # type: Dict[str, Dict[str, Tuple[float, float]]]
        else:
            root_affinities = dict(scoring.DEFAULT_ROOT_AFFINITIES)
            affinities = {head_pos: dict(dependents)
                          for head_pos, dependents in scoring.DEFAULT_AFFINITIES.items()}

        # Root affinities
        if config_parser.has_section('Root Affinities'):
            for option in config_parser.options('Root Affinities'):
                dep_pos = self._get_tag(option, 'Root Affinities')
                root_affinities[dep_pos] = self._get_float(config_parser, 'Root Affinities',
                                                           option, None)

        # Affinity tables, one section per head tag
        for section in config_parser.sections():
            if not section.startswith(AFFINITY_SECTION_PREFIX):
                continue
            head_pos = self._get_tag(section[len(AFFINITY_SECTION_PREFIX):], section)
            dependents = affinities.setdefault(head_pos, {})
            for option in config_parser.options(section):
                dep_pos = self._get_tag(option, section)
                dependents[dep_pos] = self._get_pair(config_parser, section, option)

        self._root_affinities = root_affinities
        self._affinities = affinities

    def _get_tag(self, name: str, section: str) -> str:
        tag = normalize_pos(name)
        if tag == UNKNOWN_POS and name.strip().lower() != UNKNOWN_POS.lower():
            raise ConfigError("Unrecognized part-of-speech tag %r" % name.strip(),
                              self._config_file_path, section)
        return tag

    def _get_float(self, config_parser: configparser.ConfigParser, section: str, option: str,
                   fallback: Any) -> float:
        try:
            return float(config_parser.get(section, option, fallback=fallback))
        except (TypeError, ValueError) as exc:
            raise ConfigError("Expected a number", self._config_file_path, section,
                              option) from exc

    def _get_pair(self, config_parser: configparser.ConfigParser, section: str,
                  option: str) -> Tuple[float, float]:
        values = [value.strip() for value in config_parser.get(section, option).split(',')]
        try:
            if len(values) == 1:
                # A single value applies to both sides.
                return float(values[0]), float(values[0])
            if len(values) == 2:
                return float(values[0]), float(values[1])
        except ValueError as exc:
            raise ConfigError("Expected a number or a 'left, right' pair of numbers",
                              self._config_file_path, section, option) from exc
        raise ConfigError("Expected a number or a 'left, right' pair of numbers",
                          self._config_file_path, section, option)

    @property
    def config_file_path(self) -> str:
        """The expanded, absolute path to the configuration file"""
        return self._config_file_path

    @property
    def distance_decay(self) -> float:
        """The length scale of the locality penalty"""
        return self._distance_decay

    @property
    def baseline(self) -> float:
        """The affinity of token pairs no table entry mentions"""
        return self._baseline

    @property
    def root_baseline(self) -> float:
        """The score of ROOT arcs to tags the root table does not mention"""
        return self._root_baseline

    @property
    def root_affinities(self) -> Dict[str, float]:
        """ROOT arc scores, by dependent tag"""
        return dict(self._root_affinities)

    @property
    def affinities(self) -> Dict[str, Dict[str, Tuple[float, float]]]:
        """(left, right) affinities, by head tag and then dependent tag"""
        return {head_pos: dict(dependents) for head_pos, dependents in self._affinities.items()}
