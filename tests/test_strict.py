"""
Tests for isatmos.strict
"""

import logging
import math

import pytest

from isatmos import airspeed, atmosphere, strict
from isatmos.exceptions import AtmosphereDomainError


class TestValidInputsDelegate:
    def test_atmosphere_values_unchanged(self):
        assert strict.temperature(9000.0, -1.5) == atmosphere.temperature(9000.0, -1.5)
        assert strict.pressure(13000.0) == atmosphere.pressure(13000.0)
        assert strict.density(30742.5, 228.15) == atmosphere.density(30742.5, 228.15)
        assert strict.speed_of_sound(228.15) == atmosphere.speed_of_sound(228.15)
        assert strict.conditions(9000.0, -1.5) == atmosphere.conditions(9000.0, -1.5)

    def test_ratios_unchanged(self):
        assert strict.theta(288) == atmosphere.theta(288)
        assert strict.delta(101325) == atmosphere.delta(101325)
        assert strict.sigma(1) == atmosphere.sigma(1)

    def test_airspeed_values_unchanged(self):
        cond = atmosphere.conditions(9000.0)
        assert strict.vcas_to_vtas(128.611, cond) == airspeed.vcas_to_vtas(128.611, cond)
        assert strict.vtas_to_vcas(201.01, cond.p_Pa, cond.T_K) == \
            airspeed.vtas_to_vcas(201.01, cond.p_Pa, cond.T_K)
        assert strict.mach_to_vtas(0.66, cond) == airspeed.mach_to_vtas(0.66, cond)
        assert strict.vtas_to_mach(201.0, cond.T_K) == airspeed.vtas_to_mach(201.0, cond.T_K)
        assert strict.mach_to_vcas(0.66, cond) == airspeed.mach_to_vcas(0.66, cond)
        assert strict.vcas_to_mach(128.611, cond) == airspeed.vcas_to_mach(128.611, cond)
        assert strict.transition_altitude(133.756, 0.8) == \
            pytest.approx(11260.287, abs=0.1)

    def test_zero_speed_allowed(self):
        assert strict.vcas_to_vtas(0.0, 30000.0, 230.0) == 0.0


class TestRejections:
    def test_domain_error_is_value_error(self):
        assert issubclass(AtmosphereDomainError, ValueError)

    @pytest.mark.parametrize("T", [0.0, -5.0, math.nan, math.inf])
    def test_speed_of_sound(self, T):
        with pytest.raises(AtmosphereDomainError):
            strict.speed_of_sound(T)

    def test_non_finite_altitude(self):
        with pytest.raises(AtmosphereDomainError, match="Hp must be finite"):
            strict.temperature(math.nan)

    def test_offset_producing_negative_temperature(self):
        with pytest.raises(AtmosphereDomainError):
            strict.conditions(5000.0, -400.0)

    def test_density(self):
        with pytest.raises(AtmosphereDomainError, match="p must be > 0"):
            strict.density(-1.0, 250.0)
        with pytest.raises(AtmosphereDomainError, match="T must be > 0"):
            strict.density(1000.0, 0.0)

    def test_ratios(self):
        with pytest.raises(AtmosphereDomainError):
            strict.theta(-1.0)
        with pytest.raises(AtmosphereDomainError):
            strict.delta(0.0)
        with pytest.raises(AtmosphereDomainError):
            strict.sigma(-0.1)

    def test_negative_airspeed(self):
        cond = atmosphere.conditions(3000.0)
        with pytest.raises(AtmosphereDomainError, match="Vcas"):
            strict.vcas_to_vtas(-5.0, cond)
        with pytest.raises(AtmosphereDomainError, match="M"):
            strict.mach_to_vtas(-0.1, cond)

    def test_bad_state(self):
        with pytest.raises(AtmosphereDomainError):
            strict.vtas_to_vcas(100.0, 0.0, 250.0)
        with pytest.raises(AtmosphereDomainError):
            strict.vcas_to_mach(100.0, 30000.0, -1.0)
        with pytest.raises(AtmosphereDomainError):
            strict.vtas_to_mach(100.0, 0.0)

    def test_missing_temperature(self):
        with pytest.raises(TypeError):
            strict.mach_to_vcas(0.5, 30000.0)

    def test_temperature_with_bundle(self):
        cond = atmosphere.conditions(3000.0)
        with pytest.raises(TypeError):
            strict.vcas_to_vtas(100.0, cond, 250.0)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_airspeed_inputs(self, value):
        cond = atmosphere.conditions(3000.0)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vcas_to_vtas(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vtas_to_vcas(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.mach_to_vtas(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vtas_to_mach(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.mach_to_vcas(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vcas_to_mach(value, cond)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vcas_to_vtas(100.0, value, 250.0)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.vcas_to_vtas(100.0, 30000.0, value)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_transition_inputs(self, value):
        with pytest.raises(AtmosphereDomainError, match="dT must be finite"):
            strict.transition_altitude(133.756, 0.8, value)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.transition_altitude(value, 0.8)
        with pytest.raises(AtmosphereDomainError, match="must be finite"):
            strict.transition_altitude(133.756, value)

    def test_transition_altitude(self):
        with pytest.raises(AtmosphereDomainError):
            strict.transition_altitude(133.756, 0.0)
        with pytest.raises(AtmosphereDomainError):
            strict.transition_altitude(0.0, 0.8)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="isatmos.strict"):
            with pytest.raises(AtmosphereDomainError):
                strict.speed_of_sound(-1.0)
        assert "T must be > 0" in caplog.text
