"""Clients for the RGB and white LED objects."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry, ClientEntryVoid


class RgbLedClient(ClientAbstract):
    """Colour LED with optional strobing."""

    TYPE_IDN = 100

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.red = ClientEntry(t, obj_idn, 0, "B")
        self.green = ClientEntry(t, obj_idn, 1, "B")
        self.blue = ClientEntry(t, obj_idn, 2, "B")
        self.update_color = ClientEntryVoid(t, obj_idn, 3)
        self.strobe_active = ClientEntry(t, obj_idn, 4, "B")
        self.strobe_period = ClientEntry(t, obj_idn, 5, "f")
        self.strobe_pattern = ClientEntry(t, obj_idn, 6, "I")


class WhiteLedClient(ClientAbstract):
    """White LED with intensity control and optional strobing."""

    TYPE_IDN = 101

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.intensity = ClientEntry(t, obj_idn, 0, "B")
        self.strobe_active = ClientEntry(t, obj_idn, 1, "B")
        self.strobe_period = ClientEntry(t, obj_idn, 2, "f")
        self.strobe_pattern = ClientEntry(t, obj_idn, 3, "I")