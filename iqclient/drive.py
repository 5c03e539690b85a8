"""Clients for the motor drive, anticogging and buzzer objects."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry, ClientEntryVoid


class BrushlessDriveClient(ClientAbstract):
    """Low-level brushless motor drive: modes, motor model and supply limits.

    Sub-identifiers 28, 30 and 31 are unused.
    """

    TYPE_IDN = 50

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.drive_mode = ClientEntry(t, obj_idn, 0, "B")
        self.drive_phase_pwm = ClientEntry(t, obj_idn, 1, "f")
        self.drive_phase_volts = ClientEntry(t, obj_idn, 2, "f")
        self.drive_spin_pwm = ClientEntry(t, obj_idn, 3, "f")
        self.drive_spin_volts = ClientEntry(t, obj_idn, 4, "f")
        self.drive_brake = ClientEntryVoid(t, obj_idn, 5)
        self.drive_coast = ClientEntryVoid(t, obj_idn, 6)
        self.drive_angle_offset = ClientEntry(t, obj_idn, 7, "f")
        self.drive_pwm = ClientEntry(t, obj_idn, 8, "f")
        self.drive_volts = ClientEntry(t, obj_idn, 9, "f")
        self.mech_lead_angle = ClientEntry(t, obj_idn, 10, "f")
        self.obs_supply_volts = ClientEntry(t, obj_idn, 11, "f")
        self.obs_angle = ClientEntry(t, obj_idn, 12, "f")
        self.obs_velocity = ClientEntry(t, obj_idn, 13, "f")
        self.motor_pole_pairs = ClientEntry(t, obj_idn, 14, "H")
        self.motor_emf_shape = ClientEntry(t, obj_idn, 15, "B")
        self.permute_wires = ClientEntry(t, obj_idn, 16, "B")
        self.calibration_angle = ClientEntry(t, obj_idn, 17, "f")
        self.lead_time = ClientEntry(t, obj_idn, 18, "f")
        self.commutation_hz = ClientEntry(t, obj_idn, 19, "I")
        self.phase_angle = ClientEntry(t, obj_idn, 20, "f")
        self.drive_volts_addition = ClientEntry(t, obj_idn, 21, "f")
        self.angle_adjust_enable = ClientEntry(t, obj_idn, 22, "B")
        self.motor_emf_calc = ClientEntry(t, obj_idn, 23, "f")
        self.angle_adjustment = ClientEntry(t, obj_idn, 24, "f")
        self.angle_adjust_max = ClientEntry(t, obj_idn, 25, "f")
        self.angle_adjust_kp = ClientEntry(t, obj_idn, 26, "f")
        self.angle_adjust_ki = ClientEntry(t, obj_idn, 27, "f")
        self.v_max_start = ClientEntry(t, obj_idn, 29, "f")
        self.motor_kv = ClientEntry(t, obj_idn, 32, "f")
        self.motor_r_ohm = ClientEntry(t, obj_idn, 33, "f")
        self.motor_i_max = ClientEntry(t, obj_idn, 34, "f")
        self.volts_limit = ClientEntry(t, obj_idn, 35, "f")
        self.est_motor_amps = ClientEntry(t, obj_idn, 36, "f")
        self.est_motor_torque = ClientEntry(t, obj_idn, 37, "f")
        self.motor_redline_start = ClientEntry(t, obj_idn, 38, "f")
        self.motor_redline_end = ClientEntry(t, obj_idn, 39, "f")
        self.motor_l = ClientEntry(t, obj_idn, 40, "f")
        self.derate = ClientEntry(t, obj_idn, 41, "i")
        self.motor_i_soft_start = ClientEntry(t, obj_idn, 42, "f")
        self.motor_i_soft_end = ClientEntry(t, obj_idn, 43, "f")
        self.emf = ClientEntry(t, obj_idn, 44, "f")
        self.volts_at_max_amps = ClientEntry(t, obj_idn, 45, "f")
        self.slew_volts_per_second = ClientEntry(t, obj_idn, 46, "f")
        self.slew_enable = ClientEntry(t, obj_idn, 47, "B")
        self.motoring_supply_current_limit = ClientEntry(t, obj_idn, 48, "f")
        self.regen_supply_current_limit = ClientEntry(t, obj_idn, 49, "f")
        self.supply_current_limit_enable = ClientEntry(t, obj_idn, 50, "B")
        self.regen_limiting = ClientEntry(t, obj_idn, 51, "B")
        self.regen_limit_adjust = ClientEntry(t, obj_idn, 52, "f")
        self.motoring_limiting = ClientEntry(t, obj_idn, 53, "B")
        self.motoring_limit_adjust = ClientEntry(t, obj_idn, 54, "f")
        self.regen_limit_kp = ClientEntry(t, obj_idn, 55, "f")
        self.regen_limit_ki = ClientEntry(t, obj_idn, 56, "f")
        self.regen_limit_max = ClientEntry(t, obj_idn, 57, "f")
        self.motoring_limit_kp = ClientEntry(t, obj_idn, 58, "f")
        self.motoring_limit_ki = ClientEntry(t, obj_idn, 59, "f")
        self.motoring_limit_max = ClientEntry(t, obj_idn, 60, "f")


class AnticoggingClient(ClientAbstract):
    """Table-based cogging torque compensation."""

    TYPE_IDN = 71

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.table_size = ClientEntry(t, obj_idn, 0, "H")
        self.is_data_valid = ClientEntry(t, obj_idn, 1, "B")
        self.is_enabled = ClientEntry(t, obj_idn, 2, "B")
        self.erase = ClientEntryVoid(t, obj_idn, 3)
        self.left_shift = ClientEntry(t, obj_idn, 4, "B")


class AnticoggingProClient(ClientAbstract):
    """Harmonic-based cogging torque compensation."""

    TYPE_IDN = 79

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.enabled = ClientEntry(t, obj_idn, 0, "B")
        self.tau = ClientEntry(t, obj_idn, 1, "f")
        self.num_harmonics = ClientEntry(t, obj_idn, 2, "B")
        self.voltage = ClientEntry(t, obj_idn, 3, "f")
        self.index = ClientEntry(t, obj_idn, 4, "B")
        self.harmonic = ClientEntry(t, obj_idn, 5, "B")
        self.a = ClientEntry(t, obj_idn, 6, "f")
        self.phase = ClientEntry(t, obj_idn, 7, "f")
        self.phase_total = ClientEntry(t, obj_idn, 8, "f")
        self.amplitude = ClientEntry(t, obj_idn, 9, "f")
        self.max_harmonics = ClientEntry(t, obj_idn, 10, "B")


class BuzzerControlClient(ClientAbstract):
    """Plays notes through the motor windings."""

    TYPE_IDN = 61

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.ctrl_mode = ClientEntryVoid(t, obj_idn, 0)
        self.ctrl_brake = ClientEntryVoid(t, obj_idn, 1)
        self.ctrl_coast = ClientEntryVoid(t, obj_idn, 2)
        self.ctrl_note = ClientEntryVoid(t, obj_idn, 3)
        self.volume_max = ClientEntry(t, obj_idn, 4, "f")
        self.hz = ClientEntry(t, obj_idn, 5, "H")
        self.volume = ClientEntry(t, obj_idn, 6, "B")
        self.duration = ClientEntry(t, obj_idn, 7, "H")