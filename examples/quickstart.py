"""impactsim Quickstart — assess a preset impact and try a deflection."""

from impactsim import DeflectionImpulse, assess_preset, critical_delta_v, get_preset, minimum_deflection_delta_v

result = assess_preset("Impactor-2025")
report = result.report

print(f"Mass:      {report.mass_billion_kg:.2f} billion kg")
print(f"Energy:    {report.energy_petajoules:.2f} PJ ({report.tnt_display})")
print(f"Crater:    {report.crater_diameter_km:.2f} km wide, {report.crater_depth_m / 1000:.2f} km deep")
print(f"At risk:   {report.population_at_risk:,.0f} people")
print(f"Threat:    {report.threat_level.value}")
print(f"Survival:  {report.survival_chance_percent:.1f}%")
print(result.assessment)

params = get_preset("Impactor-2025").to_parameters()
print(f"Delta-v to clear Earth (report):     {minimum_deflection_delta_v(params):.3f} km/s")
print(f"Delta-v to miss target (trajectory): {critical_delta_v(params):.3f} km/s")

deflected = assess_preset("Impactor-2025", DeflectionImpulse(1.0))
print(f"With 1 km/s: {deflected.report.deflection_status} / {deflected.trajectory.status_label}")
