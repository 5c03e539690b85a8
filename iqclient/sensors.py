"""Clients for the temperature, power and magnetic encoder objects."""

from __future__ import annotations

from .client_communication import ClientAbstract, ClientEntry, ClientEntryVoid


class CoilTemperatureEstimatorClient(ClientAbstract):
    """Thermal model estimating coil and lamination temperatures."""

    TYPE_IDN = 83

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.t_coil = ClientEntry(t, obj_idn, 0, "f")
        self.t_alu = ClientEntry(t, obj_idn, 1, "f")
        self.t_amb = ClientEntry(t, obj_idn, 2, "f")
        self.h_coil_amb_free_conv = ClientEntry(t, obj_idn, 3, "f")
        self.h_coil_stator_cond = ClientEntry(t, obj_idn, 4, "f")
        self.h_coil_amb_forced_conv = ClientEntry(t, obj_idn, 5, "f")
        self.c_coil = ClientEntry(t, obj_idn, 6, "f")
        self.h_coil_amb_forced_conv_coeff = ClientEntry(t, obj_idn, 7, "f")
        self.otw = ClientEntry(t, obj_idn, 8, "f")
        self.otlo = ClientEntry(t, obj_idn, 9, "f")
        self.derate = ClientEntry(t, obj_idn, 10, "f")
        self.q_coil_joule = ClientEntry(t, obj_idn, 11, "f")
        self.q_coil_amb_conv = ClientEntry(t, obj_idn, 12, "f")
        self.q_coil_stator_cond = ClientEntry(t, obj_idn, 13, "f")
        self.h_lam_alu = ClientEntry(t, obj_idn, 14, "f")
        self.c_lam = ClientEntry(t, obj_idn, 15, "f")
        self.k_lam_hist_coeff = ClientEntry(t, obj_idn, 16, "f")
        self.q_lam_hist = ClientEntry(t, obj_idn, 17, "f")
        self.q_lam_alu = ClientEntry(t, obj_idn, 18, "f")
        self.t_lam = ClientEntry(t, obj_idn, 19, "f")


class TemperatureEstimatorClient(ClientAbstract):
    """Lumped thermal model of the motor with over-temperature limits."""

    TYPE_IDN = 77

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.temp = ClientEntry(t, obj_idn, 0, "f")
        self.otw = ClientEntry(t, obj_idn, 1, "f")
        self.otlo = ClientEntry(t, obj_idn, 2, "f")
        self.thermal_resistance = ClientEntry(t, obj_idn, 3, "f")
        self.thermal_capacitance = ClientEntry(t, obj_idn, 4, "f")
        self.derate = ClientEntry(t, obj_idn, 5, "i")


class TemperatureMonitorUcClient(ClientAbstract):
    """Microcontroller temperature with filtering and derating."""

    TYPE_IDN = 73

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.uc_temp = ClientEntry(t, obj_idn, 0, "f")
        self.filter_fs = ClientEntry(t, obj_idn, 1, "I")
        self.filter_fc = ClientEntry(t, obj_idn, 2, "I")
        self.otw = ClientEntry(t, obj_idn, 3, "f")
        self.otlo = ClientEntry(t, obj_idn, 4, "f")
        self.derate = ClientEntry(t, obj_idn, 5, "f")


class PowerMonitorClient(ClientAbstract):
    """Supply voltage, current, power and energy measurement."""

    TYPE_IDN = 69

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.volts = ClientEntry(t, obj_idn, 0, "f")
        self.amps = ClientEntry(t, obj_idn, 1, "f")
        self.watts = ClientEntry(t, obj_idn, 2, "f")
        self.joules = ClientEntry(t, obj_idn, 3, "f")
        self.reset_joules = ClientEntryVoid(t, obj_idn, 4)
        self.filter_fs = ClientEntry(t, obj_idn, 5, "I")
        self.filter_fc = ClientEntry(t, obj_idn, 6, "I")
        self.volts_raw = ClientEntry(t, obj_idn, 7, "H")
        self.amps_raw = ClientEntry(t, obj_idn, 8, "H")
        self.volts_gain = ClientEntry(t, obj_idn, 9, "f")
        self.amps_gain = ClientEntry(t, obj_idn, 10, "f")
        self.amps_bias = ClientEntry(t, obj_idn, 11, "f")


class PowerSafetyClient(ClientAbstract):
    """Fault flags and the voltage, current and temperature safety limits."""

    TYPE_IDN = 84

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.fault_now = ClientEntry(t, obj_idn, 0, "f")
        self.fault_ever = ClientEntry(t, obj_idn, 1, "f")
        self.fault_latching = ClientEntry(t, obj_idn, 2, "f")
        self.volt_input_low = ClientEntry(t, obj_idn, 3, "f")
        self.volt_input_high = ClientEntry(t, obj_idn, 4, "f")
        self.vref_int_low = ClientEntry(t, obj_idn, 5, "f")
        self.vref_int_high = ClientEntry(t, obj_idn, 6, "f")
        self.current_input_low = ClientEntry(t, obj_idn, 7, "f")
        self.current_input_high = ClientEntry(t, obj_idn, 8, "f")
        self.motor_current_low = ClientEntry(t, obj_idn, 9, "f")
        self.motor_current_high = ClientEntry(t, obj_idn, 10, "f")
        self.temperature_uc_low = ClientEntry(t, obj_idn, 11, "f")
        self.temperature_uc_high = ClientEntry(t, obj_idn, 12, "f")
        self.temperature_coil_low = ClientEntry(t, obj_idn, 13, "f")
        self.temperature_coil_high = ClientEntry(t, obj_idn, 14, "f")


class MagAlphaClient(ClientAbstract):
    """Magnetic angle encoder: angle readings, alarms and register access."""

    TYPE_IDN = 75

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.angle_raw = ClientEntry(t, obj_idn, 0, "I")
        self.angle_rad = ClientEntry(t, obj_idn, 1, "f")
        self.alarm = ClientEntry(t, obj_idn, 2, "B")
        self.mght = ClientEntry(t, obj_idn, 3, "B")
        self.mglt = ClientEntry(t, obj_idn, 4, "B")
        self.reg_val = ClientEntry(t, obj_idn, 5, "H")
        self.reg_adr = ClientEntry(t, obj_idn, 6, "H")
        self.reg_str = ClientEntryVoid(t, obj_idn, 7)