"""Clients for the input parsing, arming, stopping and stowing objects."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry, ClientEntryVoid


class EscPropellerInputParserClient(ClientAbstract):
    """Turns an ESC throttle input into a propeller command.

    Sub-identifier 2 is unused.
    """

    TYPE_IDN = 60

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.mode = ClientEntry(t, obj_idn, 0, "B")
        self.raw_value = ClientEntry(t, obj_idn, 1, "f")
        self.sign = ClientEntry(t, obj_idn, 3, "B")
        self.volts_max = ClientEntry(t, obj_idn, 4, "f")
        self.velocity_max = ClientEntry(t, obj_idn, 5, "f")
        self.thrust_max = ClientEntry(t, obj_idn, 6, "f")
        self.safe_factor = ClientEntry(t, obj_idn, 7, "f")
        self.flip_negative = ClientEntry(t, obj_idn, 8, "B")
        self.zero_spin_throttle = ClientEntry(t, obj_idn, 9, "f")
        self.zero_spin_tolerance = ClientEntry(t, obj_idn, 10, "f")


class HobbyInputClient(ClientAbstract):
    """Hobby protocol input: protocol selection and calibration."""

    TYPE_IDN = 76

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.allowed_protocols = ClientEntry(t, obj_idn, 0, "B")
        self.protocol = ClientEntry(t, obj_idn, 1, "B")
        self.calibrated_protocol = ClientEntry(t, obj_idn, 2, "B")
        self.calibrated_high_ticks_us = ClientEntry(t, obj_idn, 3, "I")
        self.calibrated_low_ticks_us = ClientEntry(t, obj_idn, 4, "I")
        self.reset_calibration = ClientEntryVoid(t, obj_idn, 5)


class PulsingRectangularInputParserClient(ClientAbstract):
    """Input parsing options for pulsing modules."""

    TYPE_IDN = 89

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.pulsing_voltage_mode = ClientEntry(t, obj_idn, 0, "B")
        self.pulsing_voltage_limit = ClientEntry(t, obj_idn, 1, "f")


class ArmingHandlerClient(ClientAbstract):
    """Arming and disarming behaviour driven by throttle commands.

    Sub-identifier 0 is unused.
    """

    TYPE_IDN = 86

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.always_armed = ClientEntry(t, obj_idn, 1, "B")
        self.arm_on_throttle = ClientEntry(t, obj_idn, 2, "B")
        self.arm_throttle_upper_limit = ClientEntry(t, obj_idn, 3, "f")
        self.arm_throttle_lower_limit = ClientEntry(t, obj_idn, 4, "f")
        self.disarm_on_throttle = ClientEntry(t, obj_idn, 5, "B")
        self.disarm_throttle_upper_limit = ClientEntry(t, obj_idn, 6, "f")
        self.disarm_throttle_lower_limit = ClientEntry(t, obj_idn, 7, "f")
        self.consecutive_arming_throttles_to_arm = ClientEntry(t, obj_idn, 8, "I")
        self.disarm_behavior = ClientEntry(t, obj_idn, 9, "B")
        self.disarm_song_option = ClientEntry(t, obj_idn, 10, "B")
        self.manual_arming_throttle_source = ClientEntry(t, obj_idn, 11, "B")
        self.motor_armed = ClientEntry(t, obj_idn, 12, "B")


class StoppingHandlerClient(ClientAbstract):
    """Decides when the motor counts as stopped."""

    TYPE_IDN = 87

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.stopped_speed = ClientEntry(t, obj_idn, 0, "f")
        self.stopped_time = ClientEntry(t, obj_idn, 1, "f")


class StowUserInterfaceClient(ClientAbstract):
    """Moves the rotor to a stow angle and holds it there."""

    TYPE_IDN = 85

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.zero_angle = ClientEntry(t, obj_idn, 0, "f")
        self.target_angle = ClientEntry(t, obj_idn, 1, "f")
        self.target_acceleration = ClientEntry(t, obj_idn, 2, "f")
        self.sample_zero = ClientEntryVoid(t, obj_idn, 3)
        self.user_stow_request = ClientEntryVoid(t, obj_idn, 4)
        self.stow_kp = ClientEntry(t, obj_idn, 5, "f")
        self.stow_ki = ClientEntry(t, obj_idn, 6, "f")
        self.stow_kd = ClientEntry(t, obj_idn, 7, "f")
        self.hold_stow = ClientEntry(t, obj_idn, 8, "B")
        self.stow_status = ClientEntry(t, obj_idn, 9, "B")
        self.stow_result = ClientEntry(t, obj_idn, 10, "B")