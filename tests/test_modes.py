# tests/test_modes.py
# -*- coding: utf-8 -*-

import pytest

from co2calc.emissions.modes import TRANSPORT_MODES, get_mode_info, list_modes, normalise_mode


def test_every_mode_has_metadata():
    assert set(list_modes()) == set(TRANSPORT_MODES)
    for mode in list_modes():
        info = get_mode_info(mode)
        assert info.key == mode
        assert info.label and info.emoji
        assert info.color.startswith("#") and len(info.color) == 7


def test_unknown_mode_has_no_metadata():
    assert get_mode_info("hoverboard") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("car", "car"),
        (" CARRO ", "car"),
        ("Ônibus", "bus"),
        ("onibus", "bus"),
        ("Bicicleta", "bicycle"),
        ("bike", "bicycle"),
        ("Avião", "plane"),
        ("navio", "boat"),
        ("Caminhão", "truck"),
        ("hoverboard", None),
        ("", None),
        (None, None),
    ],
)
def test_normalise_mode(text, expected):
    assert normalise_mode(text) == expected
