"""
MICROSOFT ADS CHECKLIST
Bing Search, Google Import hygiene, Copilot placements and MSAN.
"""

PLATFORM = "microsoft-ads"
LABEL = "Microsoft Ads"

CATEGORIES = [
    {
        "name": "UET & Conversion Tracking",
        "weight": 0.35,
        "check_count": 2,
        "description": "Universal Event Tracking, conversion goals and enhanced conversions",
    },
    {
        "name": "Google Import",
        "weight": 0.30,
        "check_count": 3,
        "description": "Import validation, settings sync and performance comparison",
    },
    {
        "name": "Copilot Integration",
        "weight": 0.15,
        "check_count": 1,
        "description": "Copilot placements and AI-powered search",
    },
    {
        "name": "Audience Network",
        "weight": 0.20,
        "check_count": 2,
        "description": "Microsoft Audience Network placement strategy",
    },
]

CHECKS = [
    {
        "id": "MS01",
        "check": "UET tag installed",
        "severity": "critical",
        "category": "UET & Conversion Tracking",
        "pass": "UET tag firing on all pages with conversion goals",
        "warning": "UET firing without conversion goals",
        "fail": "No UET tag",
    },
    {
        "id": "MS02",
        "check": "Enhanced conversions",
        "severity": "high",
        "category": "UET & Conversion Tracking",
        "pass": "Enhanced conversions enabled",
        "warning": "Enabled on some goals",
        "fail": "Not enabled",
    },
    {
        "id": "MS05",
        "check": "Scheduled Google Import",
        "severity": "medium",
        "category": "Google Import",
        "pass": "Import scheduled with reviewed settings",
        "warning": "One-off import only",
        "fail": "Campaigns built manually and out of sync",
    },
    {
        "id": "MS06",
        "check": "Imported bid and budget review",
        "severity": "high",
        "category": "Google Import",
        "pass": "Bids and budgets adjusted for Microsoft volume",
        "warning": "Budgets adjusted, bids copied",
        "fail": "Google bids and budgets copied unchanged",
    },
    {
        "id": "MS07",
        "check": "Negative keyword import",
        "severity": "medium",
        "category": "Google Import",
        "pass": "Negative lists imported and maintained",
        "warning": "Campaign negatives only",
        "fail": "No negatives imported",
    },
    {
        "id": "MS10",
        "check": "Copilot placement eligibility",
        "severity": "low",
        "category": "Copilot Integration",
        "pass": "Ads eligible for Copilot with multimedia assets",
        "warning": "Eligible without multimedia assets",
        "fail": "Opted out of Copilot placements",
    },
    {
        "id": "MS12",
        "check": "MSAN placement exclusions",
        "severity": "medium",
        "category": "Audience Network",
        "pass": "MSAN monitored with placement exclusions",
        "warning": "MSAN on without exclusions",
        "fail": "MSAN spend unreviewed",
    },
    {
        "id": "MS13",
        "check": "LinkedIn profile targeting",
        "severity": "low",
        "category": "Audience Network",
        "pass": "LinkedIn profile bid adjustments on B2B campaigns",
        "warning": "Applied to one campaign",
        "fail": "Not used",
    },
]
