"""Pin assignments, keypad layouts and optional features of the supported modules."""

from __future__ import annotations

import enum


class Model(enum.Enum):
    """Module variants that differ in their pin-out."""

    SIM800W = "SIM800W"
    SIM800V = "SIM800V"
    SIM800H = "SIM800H"
    SIM800 = "SIM800"
    SIM808 = "SIM808"
    SIM800C = "SIM800C"


_PINS: dict[Model, tuple[tuple[str, int], ...]] = {
    Model.SIM800W: (
        ("PIN6_ADC0", 6),
        ("PIN8_GPIO1", 8),
        ("PIN9_I2C_SDA", 9),
        ("PIN10_I2C_SCL", 10),
        ("PIN11_KPLED", 11),
        ("PIN16_NETLIGHT", 16),
        ("PIN28_GPIO2", 28),
        ("PIN29_KBC5", 29),
        ("PIN30_KBC4", 30),
        ("PIN31_KBC3", 31),
        ("PIN32_KBC2", 32),
        ("PIN33_KBC1", 33),
        ("PIN34_KBC0", 34),
        ("PIN35_KBR5", 35),
        ("PIN36_KBR4", 36),
        ("PIN37_KBR3", 37),
        ("PIN38_KBR2", 38),
        ("PIN39_KBR1", 39),
        ("PIN40_KBR0", 40),
        ("PIN45_GPIO3", 45),
        ("PIN46_DISP_DATA", 46),
        ("PIN47_DISP_CLK", 47),
        ("PIN48_DISP_RST", 48),
        ("PIN49_DISP_DC", 49),
        ("PIN50_DISP_CS", 50),
        ("PIN51_VDD_EXT", 51),
        ("PIN52_PCM_SYNC", 52),
        ("PIN53_PCM_IN", 53),
        ("PIN54_PCM_CLK", 54),
        ("PIN55_PCM_OUT", 55),
        ("PIN57_GPIO4", 57),
        ("PIN58_RXD3", 58),
        ("PIN59_TXD3", 59),
        ("PIN60_RXD", 60),
        ("PIN61_TXD", 61),
        ("PIN62_DBG_RXD", 62),
        ("PIN63_DBG_TXD", 63),
        ("PIN65_LCD_LIGHT", 65),
    ),
    Model.SIM800V: (
        ("PIN7_VDD_EXT", 7),
        ("PIN5_ADC1", 5),
        ("PIN9_ADC0", 9),
        ("PIN10_PWM", 10),
        ("PIN11_NETLIGHT", 11),
        ("PIN27_I2C_SDA", 27),
        ("PIN28_I2C_SCL", 28),
        ("PIN29_SIM_PRES", 29),
        ("PIN30_KBC4", 30),
        ("PIN31_KBC3", 31),
        ("PIN32_KBC2", 32),
        ("PIN33_KBC1", 33),
        ("PIN34_KBC0", 34),
        ("PIN35_KBR4", 35),
        ("PIN36_KBR3", 36),
        ("PIN37_KBR2", 37),
        ("PIN38_KBR1", 38),
        ("PIN39_KBR0", 39),
        ("PIN40_DISP_DATA", 40),
        ("PIN41_DISP_CLK", 41),
        ("PIN42_DISP_RST", 42),
        ("PIN43_DISP_CS", 43),
        ("PIN52_PCM_SYNC", 52),
        ("PIN53_PCM_IN", 53),
        ("PIN54_PCM_CLK", 54),
        ("PIN55_PCM_OUT", 55),
        ("PIN56_RXD3", 56),
        ("PIN57_TXD3", 57),
        ("PIN58_DTR", 58),
        ("PIN59_DCD", 59),
        ("PIN60_RI", 60),
        ("PIN61_RTS", 61),
        ("PIN62_CTS", 62),
        ("PIN63_RXD", 63),
        ("PIN64_TXD", 64),
        ("PIN65_DBG_RXD", 65),
        ("PIN66_DBG_TXD", 66),
        ("PIN67_STATUS", 67),
    ),
    Model.SIM800H: (
        ("PIN3_GPIO1", 3),
        ("PIN4_STATUS", 4),
        ("PIN5_BPI_BUSI", 5),
        ("PIN18_VDD_EXT", 18),
        ("PIN20_COL0", 20),
        ("PIN21_COL3", 21),
        ("PIN22_COL2", 22),
        ("PIN23_ROW3", 23),
        ("PIN24_COL4", 24),
        ("PIN25_COL1", 25),
        ("PIN26_PWM", 26),
        ("PIN27_GPIO2", 27),
        ("PIN28_GPIO3", 28),
        ("PIN29_PCM_CLK", 29),
        ("PIN30_PCM_OUT", 30),
        ("PIN31_RXD", 31),
        ("PIN32_TXD", 32),
        ("PIN33_CTS", 33),
        ("PIN34_RTS", 34),
        ("PIN50_ADC", 50),
        ("PIN54_SIM_PRE", 54),
        ("PIN60_ROW1", 60),
        ("PIN61_ROW2", 61),
        ("PIN62_ROW0", 62),
        ("PIN63_ROW4", 63),
        ("PIN64_NETLIGHT", 64),
        ("PIN65_PCM_SYNC", 65),
        ("PIN66_PCM_IN", 66),
        ("PIN68_UART1_RI", 68),
        ("PIN69_UART1_DTR", 69),
        ("PIN70_UART1_DCD", 70),
        ("PIN74_SCL", 74),
        ("PIN75_SDA", 75),
    ),
    Model.SIM800: (
        ("PIN3_DTR", 3),
        ("PIN4_RI", 4),
        ("PIN5_DCD", 5),
        ("PIN6_PCM_OUT", 6),
        ("PIN7_CTS", 7),
        ("PIN8_RTS", 8),
        ("PIN9_TXD", 9),
        ("PIN10_RXD", 10),
        ("PIN11_GPIO17", 11),
        ("PIN12_PCM_IN", 12),
        ("PIN13_GPIO19", 13),
        ("PIN14_PCM_SYNC", 14),
        ("PIN15_VDD_EXT", 15),
        ("PIN25_ADC", 25),
        ("PIN34_SIM_PRE", 34),
        ("PIN35_PWM1", 35),
        ("PIN36_PWM2", 36),
        ("PIN37_SDA", 37),
        ("PIN38_SCL", 38),
        ("PIN40_ROW4", 40),
        ("PIN41_ROW3", 41),
        ("PIN42_ROW2", 42),
        ("PIN43_ROW1", 43),
        ("PIN44_ROW0", 44),
        ("PIN47_COL4", 47),
        ("PIN48_COL3", 48),
        ("PIN49_COL2", 49),
        ("PIN50_COL1", 50),
        ("PIN51_COL0", 51),
        ("PIN52_NETLIGHT", 52),
        ("PIN66_STATUS", 66),
        ("PIN67_RF_SYNC", 67),
        ("PIN68_PCM_CLK", 68),
    ),
    Model.SIM808: (
        ("PIN9_DTR", 9),
        ("PIN10_RI", 10),
        ("PIN11_DCD", 11),
        ("PIN12_CTS", 12),
        ("PIN13_RTS", 13),
        ("PIN14_TXD", 14),
        ("PIN15_RXD", 15),
        ("PIN23_ADC1", 23),
        ("PIN24_ADC2", 24),
        ("PIN33_SIM_PRE", 33),
        ("PIN38_SDA", 38),
        ("PIN39_SCL", 39),
        ("PIN41_PWM2", 41),
        ("PIN42_PWM1", 42),
        ("PIN43_GPIO19", 43),
        ("PIN44_GPIO17", 44),
        ("PIN45_PCM_SYNC", 45),
        ("PIN46_PCM_CLK", 46),
        ("PIN47_PCM_IN", 47),
        ("PIN48_PCM_OUT", 48),
        ("PIN49_STATUS", 49),
        ("PIN50_NETLIGHT", 50),
        ("PIN55_ROW3", 55),
        ("PIN56_ROW2", 56),
        ("PIN57_ROW1", 57),
        ("PIN58_ROW0", 58),
        ("PIN59_COL3", 59),
        ("PIN60_COL2", 60),
        ("PIN61_COL1", 61),
        ("PIN62_COL0", 62),
    ),
    Model.SIM800C: (
        ("PIN1_UART1_TXD", 1),
        ("PIN2_UART1_RXD", 2),
        ("PIN3_UART1_RTS", 3),
        ("PIN4_UART1_CTS", 4),
        ("PIN5_UART1_DCD", 5),
        ("PIN6_UART1_DTR", 6),
        ("PIN7_UART1_RI", 7),
        ("PIN14_SIM_DET", 14),
        ("PIN22_UART2_TXD", 22),
        ("PIN23_UART2_RXD", 23),
        ("PIN38_ADC", 38),
        ("PIN41_NETLIGHT", 41),
        ("PIN42_STATUS", 42),
    ),
}

_PIN_COUNT: dict[Model, int] = {
    Model.SIM800W: 68,
    Model.SIM800V: 68,
    Model.SIM800H: 76,
    Model.SIM800: 69,
    Model.SIM808: 63,
    Model.SIM800C: 43,
}


def _matrix_keys(size: int) -> tuple[str, ...]:
    grid = tuple(f"C{col}R{row}" for col in range(size) for row in range(size))
    return grid + ("POWER",)


_KEYS: dict[Model, tuple[str, ...]] = {
    Model.SIM800W: _matrix_keys(6),
    Model.SIM800V: _matrix_keys(6),
    Model.SIM800C: ("POWER",),
    Model.SIM800H: _matrix_keys(5),
    Model.SIM800: _matrix_keys(5),
    Model.SIM808: _matrix_keys(5),
}


def _model(model: Model | str) -> Model:
    return model if isinstance(model, Model) else Model(model)


def _normalise(name: str, prefix: str) -> str:
    key = name.strip().upper()
    return key[len(prefix):] if key.startswith(prefix) else key


def pin_table(model: Model | str) -> dict[str, int]:
    """Return the named pins of *model* in declaration order."""
    return dict(_PINS[_model(model)])


def pin_count(model: Model | str) -> int:
    """Return the size of the pin numbering space of *model*."""
    return _PIN_COUNT[_model(model)]


def pin_number(model: Model | str, name: str) -> int:
    """Return the number of the pin called *name*; an ``EAT_`` prefix is allowed."""
    table = dict(_PINS[_model(model)])
    key = _normalise(name, "EAT_")
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"{name!r} is not a pin of {_model(model).value}") from None


def key_names(model: Model | str) -> tuple[str, ...]:
    """Return the keypad key names of *model*, ordered by key code."""
    return _KEYS[_model(model)]


def key_code(model: Model | str, name: str) -> int:
    """Return the key code of *name*; an ``EAT_KEY_`` prefix is allowed."""
    keys = _KEYS[_model(model)]
    key = _normalise(name, "EAT_KEY_")
    try:
        return keys.index(key)
    except ValueError:
        raise KeyError(f"{name!r} is not a key of {_model(model).value}") from None


def supports_lcd_light(model: Model | str) -> bool:
    """Whether *model* has an LCD backlight switch."""
    return _model(model) not in (Model.SIM808, Model.SIM800)


def supports_keypad_led(model: Model | str) -> bool:
    """Whether *model* has a keypad LED switch."""
    return _model(model) is not Model.SIM808