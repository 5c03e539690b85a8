"""Clients for the GPIO, ADC and PWM peripheral objects."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry


class GpioControllerClient(ClientAbstract):
    """General purpose pins, set as whole registers or one pin at a time."""

    TYPE_IDN = 90

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.mode_register = ClientEntry(t, obj_idn, 0, "B")
        self.inputs_register = ClientEntry(t, obj_idn, 1, "B")
        self.outputs_register = ClientEntry(t, obj_idn, 2, "B")
        self.use_pull_register = ClientEntry(t, obj_idn, 3, "B")
        self.pull_type_register = ClientEntry(t, obj_idn, 4, "B")
        self.push_pull_open_drain_register = ClientEntry(t, obj_idn, 5, "B")
        self.addressable_gpio_mode = ClientEntry(t, obj_idn, 6, "B")
        self.addressable_outputs = ClientEntry(t, obj_idn, 7, "B")
        self.addressable_use_pull = ClientEntry(t, obj_idn, 8, "B")
        self.addressable_pull_type = ClientEntry(t, obj_idn, 9, "B")
        self.addressable_push_pull_open_drain = ClientEntry(t, obj_idn, 10, "B")


class AdcInterfaceClient(ClientAbstract):
    """Analogue input reading."""

    TYPE_IDN = 91

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.adc_voltage = ClientEntry(t, obj_idn, 0, "f")
        self.raw_value = ClientEntry(t, obj_idn, 1, "H")


class PwmInterfaceClient(ClientAbstract):
    """PWM output: frequency, duty cycle and mode."""

    TYPE_IDN = 92

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.pwm_frequency = ClientEntry(t, obj_idn, 0, "I")
        self.duty_cycle = ClientEntry(t, obj_idn, 1, "B")
        self.pwm_mode = ClientEntry(t, obj_idn, 2, "B")