"""
LINKEDIN ADS CHECKLIST
B2B targeting, Lead Gen Forms, Thought Leader Ads and Insight Tag checks.
"""

PLATFORM = "linkedin-ads"
LABEL = "LinkedIn Ads"

CATEGORIES = [
    {
        "name": "Conversion Tracking",
        "weight": 0.30,
        "check_count": 3,
        "description": "Insight Tag, conversion events and attribution windows",
    },
    {
        "name": "B2B Targeting",
        "weight": 0.30,
        "check_count": 3,
        "description": "Company, job title, seniority and ABM lists",
    },
    {
        "name": "Lead Gen Forms",
        "weight": 0.25,
        "check_count": 2,
        "description": "Form design, field count and CRM sync",
    },
    {
        "name": "Thought Leader Ads",
        "weight": 0.15,
        "check_count": 2,
        "description": "Executive-voice content and engagement amplification",
    },
]

CHECKS = [
    {
        "id": "L01",
        "check": "Insight Tag installed",
        "severity": "critical",
        "category": "Conversion Tracking",
        "pass": "Insight Tag firing on all pages",
        "warning": "Tag missing on some landing pages",
        "fail": "No Insight Tag",
    },
    {
        "id": "L02",
        "check": "Conversion events defined",
        "severity": "critical",
        "category": "Conversion Tracking",
        "pass": "Lead and pipeline conversions defined and recording",
        "warning": "Only page-view conversions defined",
        "fail": "No conversion events",
    },
    {
        "id": "L03",
        "check": "Conversions API",
        "severity": "high",
        "category": "Conversion Tracking",
        "pass": "CAPI sending offline CRM stages",
        "warning": "CAPI connected without CRM stages",
        "fail": "No Conversions API",
    },
    {
        "id": "L08",
        "check": "Audience Expansion disabled for ABM",
        "severity": "high",
        "category": "B2B Targeting",
        "pass": "Audience Expansion off on ABM and job-title campaigns",
        "warning": "Off on most campaigns",
        "fail": "Audience Expansion on for ABM campaigns",
    },
    {
        "id": "L09",
        "check": "Matched Audiences (ABM lists)",
        "severity": "high",
        "category": "B2B Targeting",
        "pass": "Company lists uploaded with >70% match rate",
        "warning": "Match rate 40-70%",
        "fail": "No company lists",
    },
    {
        "id": "L10",
        "check": "Seniority and function targeting",
        "severity": "medium",
        "category": "B2B Targeting",
        "pass": "Seniority and job function layered on every campaign",
        "warning": "Job titles only",
        "fail": "Industry-only targeting",
    },
    {
        "id": "L14",
        "check": "Lead Gen Form field count",
        "severity": "medium",
        "category": "Lead Gen Forms",
        "pass": "≤5 fields with auto-fill",
        "warning": "6-8 fields",
        "fail": ">8 fields or custom questions without auto-fill",
    },
    {
        "id": "L15",
        "check": "CRM sync for leads",
        "severity": "high",
        "category": "Lead Gen Forms",
        "pass": "Leads synced to CRM in real time",
        "warning": "Daily manual export",
        "fail": "Leads left in Campaign Manager",
    },
    {
        "id": "L20",
        "check": "Thought Leader Ads running",
        "severity": "medium",
        "category": "Thought Leader Ads",
        "pass": "At least one executive post promoted each month",
        "warning": "Tested once",
        "fail": "Never tested",
    },
    {
        "id": "L21",
        "check": "Engagement retargeting",
        "severity": "low",
        "category": "Thought Leader Ads",
        "pass": "Engaged audiences retargeted with conversion offers",
        "warning": "Retargeting audiences built but unused",
        "fail": "No engagement retargeting",
    },
]
