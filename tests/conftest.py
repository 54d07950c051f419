"""Shared fixtures — sample keymap sources and the split-keyboard grid."""

import pytest

from keymapfmt.layout import Grid
from tests.helpers import make_grid

SPLIT_ROWS = (
    "K K K K K K . . . . . K K K K K K",
    "K K K K K K . . . . . K K K K K K",
    "K K K K K K K K . K K K K K K K K",
    ". . . K K K K K . K K K K K . . .",
)

QWERTY_KEYS = [
    "KC_ESC", "KC_Q", "KC_W", "KC_E", "KC_R", "KC_T",
    "KC_Y", "KC_U", "KC_I", "KC_O", "KC_P", "KC_BSPC",
    "SFT_TAB", "KC_A", "KC_S", "KC_D", "KC_F", "KC_G",
    "KC_H", "KC_J", "KC_K", "KC_L", "KC_SCLN", "KC_QUOTE",
    "KC_LCTL", "KC_Z", "KC_X", "KC_C", "KC_V", "KC_B", "KC_CPYP", "ADJUST",
    "FKEYS", "", "KC_N", "KC_M", "KC_COMM", "KC_DOT", "KC_SLSH", "KC_RSFT",
    "KC_LALT", "NAV", "SYM", "KC_ENT", "KC_LGUI",
    "KC_RGUI", "KC_SPC", "NAV", "", "",
]

KEYMAP_C = """\
/* Copyright 2019 Thomas Baart <thomas@splitkb.com>
 * Licensed under the GNU General Public License, version 2 or later.
 */
#include QMK_KEYBOARD_H

enum layers {
    _QWERTY = 0,
    _NAV,
};

#define SYM      MO(_SYM)
#define NAV      MO(_NAV)

// clang-format off
const uint16_t PROGMEM keymaps[][MATRIX_ROWS][MATRIX_COLS] = {
    [_QWERTY] = LAYOUT(
     KC_ESC  , KC_Q ,  KC_W   ,  KC_E  ,   KC_R ,   KC_T ,                                        KC_Y,   KC_U ,  KC_I ,   KC_O ,  KC_P , KC_BSPC,
     SFT_TAB , KC_A ,  KC_S   ,  KC_D  ,   KC_F ,   KC_G ,                                        KC_H,   KC_J ,  KC_K ,   KC_L ,KC_SCLN,KC_QUOTE,
     KC_LCTL , KC_Z ,  KC_X   ,  KC_C  ,   KC_V ,   KC_B , KC_CPYP,ADJUST,     FKEYS  , _______, KC_N,   KC_M ,KC_COMM, KC_DOT ,KC_SLSH, KC_RSFT,
                                 KC_LALT , NAV  , SYM , KC_ENT, KC_LGUI,     KC_RGUI , KC_SPC  , NAV  , _______, _______
    ),

    [_NAV] = LAYOUT(
      _______, _______, _______, _______, _______, _______,                                     KC_PGUP, KC_HOME, KC_UP,   KC_END,  KC_VOLU, KC_DEL,
      _______, KC_LGUI, KC_LALT, KC_LCTL, KC_LSFT, _______,                                     KC_PGDN, KC_LEFT, KC_DOWN, KC_RGHT, KC_VOLD, KC_INS,
      _______, _______, _______, _______, _______, _______, _______, KC_SCRL, _______, _______,KC_PAUSE, KC_MPRV, KC_MPLY, KC_MNXT, KC_MUTE, KC_PSCR,
                                 _______, _______, _______, _______, _______, _______, _______, _______, _______, LCTL(KC_1)
    ),
};
// clang-format on

bool process_record_user(uint16_t keycode, keyrecord_t *record) {
    return true;
}
"""


@pytest.fixture
def split_grid() -> Grid:
    """Four-row split keyboard: two 6-column halves plus thumb clusters."""
    return make_grid(*SPLIT_ROWS)


@pytest.fixture
def qwerty_keys() -> list[str]:
    return list(QWERTY_KEYS)


@pytest.fixture
def keymap_source() -> str:
    return KEYMAP_C


@pytest.fixture
def keymap_file(tmp_path):
    path = tmp_path / "keymap.c"
    path.write_text(KEYMAP_C, encoding="utf-8")
    return path


@pytest.fixture
def layout_file(tmp_path):
    path = tmp_path / "split.layout"
    path.write_text("# split keyboard\n" + "\n".join(SPLIT_ROWS) + "\n", encoding="utf-8")
    return path
