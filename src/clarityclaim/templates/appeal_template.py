"""Plain-text appeal letter template.

Used whenever no hosted model is configured or the model call fails.
Missing identity fields are filled with bracketed placeholders by the
renderer so the letter can be completed by hand.
"""

APPEAL_TEMPLATE = """{{ today }}

{{ payer_name }}
Appeals Department
[Payer Address]

RE: Appeal for Denied Claim
Claim Number: {{ claim_number }}
Patient Name: {{ patient_name }}
Patient ID: {{ patient_id }}
Date of Service: {{ service_date }}
Billed Amount: ${{ billed_amount }}

Dear Appeals Committee,

I am writing to formally appeal the denial of the above-referenced claim. After careful review of the denial reason and the patient's medical records, I believe this claim should be reconsidered and approved for payment.

DENIAL REASON CITED:
{{ denial_reason }}
{% if denial_code %}Denial Code: {{ denial_code }}{% endif %}

GROUNDS FOR APPEAL:

1. MEDICAL NECESSITY
The services provided were medically necessary for the treatment of the patient's condition. The procedure codes ({{ procedure_codes }}) directly address the diagnosed conditions ({{ diagnosis_codes }}).

2. CLINICAL DOCUMENTATION
Complete clinical documentation supporting the medical necessity of these services is attached to this appeal. This includes:
- Progress notes from the date of service
- Relevant diagnostic test results
- Treatment plan documentation

3. COVERAGE UNDER PLAN BENEFITS
The services rendered are covered benefits under the patient's plan and meet all coverage criteria as outlined in the plan's Summary of Benefits.

REQUEST FOR RECONSIDERATION:
Based on the above information and the attached supporting documentation, I respectfully request that you overturn the denial and process this claim for payment. The services provided were appropriate, medically necessary, and consistent with accepted standards of care.

If additional information is needed to process this appeal, please contact our office at your earliest convenience.

Thank you for your prompt attention to this matter.

Sincerely,

{{ provider_name }}
{{ provider_npi }}
{{ facility_name }}

Enclosures:
- Copy of original claim
- Medical records
- Supporting clinical documentation"""
