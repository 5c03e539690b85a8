"""Clients for the motion control objects: angle, propeller, superposition and inputs."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry, ClientEntryVoid


class MultiTurnAngleControlClient(ClientAbstract):
    """Multi-turn angle, velocity and trajectory control.

    Sub-identifier 28 is unused.
    """

    TYPE_IDN = 59

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.ctrl_mode = ClientEntry(t, obj_idn, 0, "b")
        self.ctrl_brake = ClientEntryVoid(t, obj_idn, 1)
        self.ctrl_coast = ClientEntryVoid(t, obj_idn, 2)
        self.ctrl_angle = ClientEntry(t, obj_idn, 3, "f")
        self.ctrl_velocity = ClientEntry(t, obj_idn, 4, "f")
        self.angle_kp = ClientEntry(t, obj_idn, 5, "f")
        self.angle_ki = ClientEntry(t, obj_idn, 6, "f")
        self.angle_kd = ClientEntry(t, obj_idn, 7, "f")
        self.timeout = ClientEntry(t, obj_idn, 8, "f")
        self.ctrl_pwm = ClientEntry(t, obj_idn, 9, "f")
        self.ctrl_volts = ClientEntry(t, obj_idn, 10, "f")
        self.obs_angular_displacement = ClientEntry(t, obj_idn, 11, "f")
        self.obs_angular_velocity = ClientEntry(t, obj_idn, 12, "f")
        self.meter_per_rad = ClientEntry(t, obj_idn, 13, "f")
        self.ctrl_linear_displacement = ClientEntry(t, obj_idn, 14, "f")
        self.ctrl_linear_velocity = ClientEntry(t, obj_idn, 15, "f")
        self.obs_linear_displacement = ClientEntry(t, obj_idn, 16, "f")
        self.obs_linear_velocity = ClientEntry(t, obj_idn, 17, "f")
        self.angular_speed_max = ClientEntry(t, obj_idn, 18, "f")
        self.trajectory_angular_displacement = ClientEntry(t, obj_idn, 19, "f")
        self.trajectory_angular_velocity = ClientEntry(t, obj_idn, 20, "f")
        self.trajectory_angular_acceleration = ClientEntry(t, obj_idn, 21, "f")
        self.trajectory_duration = ClientEntry(t, obj_idn, 22, "f")
        self.trajectory_linear_displacement = ClientEntry(t, obj_idn, 23, "f")
        self.trajectory_linear_velocity = ClientEntry(t, obj_idn, 24, "f")
        self.trajectory_linear_acceleration = ClientEntry(t, obj_idn, 25, "f")
        self.trajectory_average_speed = ClientEntry(t, obj_idn, 26, "f")
        self.trajectory_queue_mode = ClientEntry(t, obj_idn, 27, "b")
        self.ff = ClientEntry(t, obj_idn, 29, "i")
        self.sample_zero_angle = ClientEntryVoid(t, obj_idn, 30)
        self.zero_angle = ClientEntry(t, obj_idn, 31, "f")


class PropellerMotorControlClient(ClientAbstract):
    """Propeller speed and thrust control with timeout handling."""

    TYPE_IDN = 52

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.ctrl_mode = ClientEntry(t, obj_idn, 0, "B")
        self.ctrl_brake = ClientEntryVoid(t, obj_idn, 1)
        self.ctrl_coast = ClientEntryVoid(t, obj_idn, 2)
        self.ctrl_pwm = ClientEntry(t, obj_idn, 3, "f")
        self.ctrl_volts = ClientEntry(t, obj_idn, 4, "f")
        self.ctrl_velocity = ClientEntry(t, obj_idn, 5, "f")
        self.ctrl_thrust = ClientEntry(t, obj_idn, 6, "f")
        self.velocity_kp = ClientEntry(t, obj_idn, 7, "f")
        self.velocity_ki = ClientEntry(t, obj_idn, 8, "f")
        self.velocity_kd = ClientEntry(t, obj_idn, 9, "f")
        self.velocity_ff0 = ClientEntry(t, obj_idn, 10, "f")
        self.velocity_ff1 = ClientEntry(t, obj_idn, 11, "f")
        self.velocity_ff2 = ClientEntry(t, obj_idn, 12, "f")
        self.propeller_kt_pos = ClientEntry(t, obj_idn, 13, "f")
        self.propeller_kt_neg = ClientEntry(t, obj_idn, 14, "f")
        self.timeout = ClientEntry(t, obj_idn, 15, "f")
        self.input_filter_fc = ClientEntry(t, obj_idn, 16, "I")
        self.timeout_meaning = ClientEntry(t, obj_idn, 17, "B")
        self.timeout_behavior = ClientEntry(t, obj_idn, 18, "B")
        self.timeout_song_option = ClientEntry(t, obj_idn, 19, "B")


class VoltageSuperPositionClient(ClientAbstract):
    """Superimposes a periodic voltage on the drive for pulsing control."""

    TYPE_IDN = 74

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.zero_angle = ClientEntry(t, obj_idn, 0, "f")
        self.frequency = ClientEntry(t, obj_idn, 1, "B")
        self.phase = ClientEntry(t, obj_idn, 2, "f")
        self.amplitude = ClientEntry(t, obj_idn, 3, "f")
        self.voltage = ClientEntry(t, obj_idn, 4, "f")
        self.max_allowed_amplitude = ClientEntry(t, obj_idn, 5, "f")
        self.velocity_cutoff = ClientEntry(t, obj_idn, 6, "f")
        self.poly_limit_zero = ClientEntry(t, obj_idn, 7, "f")
        self.poly_limit_one = ClientEntry(t, obj_idn, 8, "f")
        self.poly_limit_two = ClientEntry(t, obj_idn, 9, "f")
        self.poly_limit_three = ClientEntry(t, obj_idn, 10, "f")
        self.phase_lead_time = ClientEntry(t, obj_idn, 11, "f")
        self.phase_lead_angle = ClientEntry(t, obj_idn, 12, "f")
        self.phase_act = ClientEntry(t, obj_idn, 13, "f")
        self.amplitude_act = ClientEntry(t, obj_idn, 14, "f")
        self.sample_mechanical_zero = ClientEntryVoid(t, obj_idn, 15)
        self.propeller_torque_offset_angle = ClientEntry(t, obj_idn, 16, "f")


class StepDirectionInputClient(ClientAbstract):
    """Step and direction input: each step moves the target angle."""

    TYPE_IDN = 58

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.angle = ClientEntry(t, obj_idn, 0, "f")
        self.angle_step = ClientEntry(t, obj_idn, 1, "f")


class ServoInputParserClient(ClientAbstract):
    """Maps a servo input onto a control unit range."""

    TYPE_IDN = 78

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.mode = ClientEntry(t, obj_idn, 0, "B")
        self.unit_min = ClientEntry(t, obj_idn, 1, "f")
        self.unit_max = ClientEntry(t, obj_idn, 2, "f")