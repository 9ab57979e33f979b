# src/vancoviz/note.py
from vancoengine.types import PatientCovariates, BodyMetrics, DoseCandidate
from vancoengine.config import AUC_ACCEPTABLE


def progress_note(cov: PatientCovariates, body: BodyMetrics, candidate: DoseCandidate) -> str:
    """Plain-text pharmacy consult note for the selected regimen."""
    dose = f"{candidate.dose_mg:g}"
    freq = f"{candidate.tau_h:g}"
    lo, hi = AUC_ACCEPTABLE
    return f"""[Patient description, reason for consult]

Patient Metrics
Age:      {cov.age:g} yrs
Height:   {cov.height_in:g} in
Gender:   {cov.sex.capitalize()}
Total BW: {cov.weight_kg:g} kg
Ideal BW: {body.ibw_kg:.1f} kg
Adjusted BW: {body.adjbw_kg:.1f} kg
CrCl:     {body.crcl_ml_min:.0f} mL/min

Recent Doses/Levels
Vancomycin dose: {dose} mg IV Q{freq}hrs (infused over {candidate.infusion_h:g} hrs)
Estimated AUC/MIC: {candidate.auc24:.1f} mcg*hr/mL
Estimated peak: {candidate.peak:.1f} mcg/mL
Estimated trough: {candidate.trough:.1f} mcg/mL
Therapeutic target: AUC/MIC {lo:g} to {hi:g} mcg*hr/mL

A/P:
1. Recommend vancomycin {dose} mg IV Q{freq}hrs
2. [Discuss when next vancomycin level(s) should be obtained based on clinical factors and/or institution policy]
3. Monitor renal function (urine output, BUN/SCr). Dose adjustments may be necessary with a significant change in renal function.

Please contact with questions. Thank you for the consult.
[Signature, contact information]"""
