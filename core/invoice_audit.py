# =============================================================================
# core/invoice_audit.py  —  logi_master_invoice_audit
# =============================================================================
#
# WHAT THIS TOOL DOES:
#   Produces an audit report for a supplier invoice file:
#     1. Extracts the invoice number from the file path
#     2. Checks the Incoterm and HS code against reference data (soft rules)
#     3. Derives placeholder OCR-confidence and hs-risk figures from the
#        invoice number's seed
#     4. Runs the ZERO guard on the hs-risk (hard stop)
#     5. Returns a fixed cost breakdown and the next workflow steps
#
# PLACEHOLDER NUMBERS:
#   There is no OCR engine behind this.  The figures are deterministic
#   stand-ins so the agent can practise the audit workflow; the same file
#   always yields the same report.
#
# THE RISK FORMULA IS CONFIGURABLE:
#   hs_risk = HS_RISK_FLOOR + (seed % HS_RISK_BUCKETS) / 100
#   With the defaults (0.05, 25) it stays within 0.05–0.29, well under the
#   0.8 stop level.  The formula and the guard threshold are separate
#   settings in AppConfig.
# =============================================================================

from core.config import AppConfig
from core.formatting import format_currency
from core.models import CallContext, ToolResult
from core.registry import LogisticsTool
from core.seed import hash_to_int
from core.validation import (
    extract_invoice_number,
    require_text,
    validate_hs_code,
    validate_incoterm,
)

# Fixed cost lines (USD), business placeholders
NET_AMOUNT = 102000
HVDC_HANDLING = 33000
INSPECTION = 4500

NEXT_STEPS = ["sap_entry_ready", "approval_workflow", "payment_queue"]


def estimate_hs_risk(seed: int) -> float:
    return AppConfig.HS_RISK_FLOOR + (seed % AppConfig.HS_RISK_BUCKETS) / 100


def invoice_audit(args: dict, context: CallContext) -> ToolResult:
    invoice_path = require_text(args.get("invoice_path"), "invoice_path")

    invoice_no = extract_invoice_number(invoice_path)
    incoterm = validate_incoterm(args.get("incoterm"), context.reference)
    hs_code = validate_hs_code(args.get("hs_code"), context.reference)

    seed = hash_to_int(invoice_no)
    ocr_confidence = 0.90 + (seed % 6) / 100   # 0.90 – 0.95
    hs_risk = estimate_hs_risk(seed)

    context.zero_guard(hs_risk=hs_risk, cert_missing=False)

    total = NET_AMOUNT + HVDC_HANDLING + INSPECTION

    json = {
        "ok": True,
        "ts": context.now(),
        "file": invoice_path,
        "invoice_no": invoice_no,
        "metrics": {
            "ocr_confidence": round(ocr_confidence, 3),
            "hs_risk": round(hs_risk, 2),
        },
        "validations": {
            "incoterm": incoterm.to_dict(),
            "hs_code": hs_code.to_dict(),
            "dem_det_ready": True,
            "vendor_whitelist": True,
            "format": True,
        },
        "amounts": {
            "currency": AppConfig.CURRENCY,
            "net": NET_AMOUNT,
            "handling": HVDC_HANDLING,
            "inspection": INSPECTION,
            "total": total,
        },
        "next": list(NEXT_STEPS),
    }

    text_parts = [
        "📋 Invoice Audit ✔",
        f"File:{invoice_path}",
        f"Inv:{invoice_no}",
        f"OCR:{ocr_confidence * 100:.1f}%",
        f"Incoterm:{incoterm.code or 'N/A'}",
        f"HS:{hs_code.code or 'N/A'}",
        f"Total:{format_currency(total)}",
    ]
    if not incoterm.valid:
        text_parts.append("⚠️INCOTERM")
    if not hs_code.valid:
        text_parts.append("⚠️HS")

    context.logger.info(f"Audited {invoice_no}: hs_risk={hs_risk:.2f}")
    return ToolResult(json=json, text="  ".join(text_parts))


INVOICE_AUDIT_TOOL = LogisticsTool(
    name="logi_master_invoice_audit",
    description="OCR-based invoice audit (Incoterm/HS/DEM-DET checks)",
    input_schema={
        "type": "object",
        "properties": {
            "invoice_path": {"type": "string"},
            "incoterm": {"type": "string"},
            "hs_code": {"type": "string"},
        },
        "required": ["invoice_path"],
    },
    handler=invoice_audit,
)
