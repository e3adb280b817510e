"""
GOOGLE ADS CHECKLIST
Search, Display, YouTube and Performance Max account health checks.
"""

PLATFORM = "google-ads"
LABEL = "Google Ads"

CATEGORIES = [
    {
        "name": "Conversion Tracking",
        "weight": 0.25,
        "check_count": 5,
        "description": "Conversion actions, Enhanced Conversions, GA4 and consent",
    },
    {
        "name": "Wasted Spend & Negatives",
        "weight": 0.20,
        "check_count": 4,
        "description": "Search term hygiene and negative keyword coverage",
    },
    {
        "name": "Account Structure",
        "weight": 0.15,
        "check_count": 4,
        "description": "Campaign organization, brand separation and PMax overlap",
    },
    {
        "name": "Keywords & Quality Score",
        "weight": 0.15,
        "check_count": 3,
        "description": "Quality Score components and keyword performance",
    },
    {
        "name": "Ads & Assets",
        "weight": 0.15,
        "check_count": 3,
        "description": "RSA completeness, Ad Strength and PMax asset density",
    },
    {
        "name": "Settings & Targeting",
        "weight": 0.10,
        "check_count": 3,
        "description": "Extensions, audiences, Customer Match and placements",
    },
]

CHECKS = [
    # Conversion Tracking (25%)
    {
        "id": "G42",
        "check": "Primary conversion actions configured",
        "severity": "critical",
        "category": "Conversion Tracking",
        "pass": "At least one active primary conversion action recording conversions",
        "warning": "Conversion actions exist but none recorded in the last 30 days",
        "fail": "No active conversion actions configured",
    },
    {
        "id": "G43",
        "check": "Enhanced Conversions enabled",
        "severity": "critical",
        "category": "Conversion Tracking",
        "pass": "Enhanced Conversions active with hashed first-party data",
        "warning": "Enabled but match rate below 50%",
        "fail": "Enhanced Conversions not enabled",
    },
    {
        "id": "G44",
        "check": "GA4 linked and importing",
        "severity": "high",
        "category": "Conversion Tracking",
        "pass": "GA4 property linked, audiences and key events flowing",
        "warning": "Linked but key events not imported",
        "fail": "No GA4 link",
    },
    {
        "id": "G45",
        "check": "Consent Mode v2",
        "severity": "high",
        "category": "Conversion Tracking",
        "pass": "Consent Mode v2 advanced implementation",
        "warning": "Basic implementation only",
        "fail": "Consent Mode not implemented (EEA traffic)",
    },
    {
        "id": "G47",
        "check": "Attribution model",
        "severity": "medium",
        "category": "Conversion Tracking",
        "pass": "Data-driven attribution on primary actions",
        "warning": "Position-based or time-decay attribution",
        "fail": "Last-click attribution on primary actions",
    },
    # Wasted Spend & Negatives (20%)
    {
        "id": "G16",
        "check": "Irrelevant search term spend",
        "severity": "critical",
        "category": "Wasted Spend & Negatives",
        "pass": "<5% of spend on irrelevant search terms",
        "warning": "5-15% of spend on irrelevant terms",
        "fail": ">15% of spend on irrelevant search terms",
    },
    {
        "id": "G17",
        "check": "Negative keyword lists",
        "severity": "high",
        "category": "Wasted Spend & Negatives",
        "pass": "Shared negative lists applied to all Search campaigns",
        "warning": "Campaign-level negatives only",
        "fail": "No negative keywords",
    },
    {
        "id": "G18",
        "check": "Search term review cadence",
        "severity": "medium",
        "category": "Wasted Spend & Negatives",
        "pass": "Search terms reviewed weekly",
        "warning": "Reviewed monthly",
        "fail": "No search term review in 90 days",
    },
    {
        "id": "G19",
        "check": "Broad match paired with Smart Bidding",
        "severity": "high",
        "category": "Wasted Spend & Negatives",
        "pass": "Broad match only runs with a conversion-based bid strategy",
        "warning": "Broad match on Maximize Clicks in one campaign",
        "fail": "Broad match on manual CPC across campaigns",
    },
    # Account Structure (15%)
    {
        "id": "G07",
        "check": "Brand exclusions in Performance Max",
        "severity": "high",
        "category": "Account Structure",
        "pass": "Brand exclusions applied to PMax alongside brand Search",
        "warning": "Exclusions applied to some PMax campaigns",
        "fail": "No brand exclusions in PMax alongside brand Search",
    },
    {
        "id": "G08",
        "check": "Brand vs non-brand separation",
        "severity": "high",
        "category": "Account Structure",
        "pass": "Brand and non-brand in separate campaigns and budgets",
        "warning": "Separated campaigns sharing one budget",
        "fail": "Brand and non-brand keywords mixed",
    },
    {
        "id": "G09",
        "check": "Campaign naming convention",
        "severity": "low",
        "category": "Account Structure",
        "pass": "Consistent naming convention across campaigns",
        "warning": "Convention used in most campaigns",
        "fail": "No naming convention",
    },
    {
        "id": "G10",
        "check": "Geographic targeting accuracy",
        "severity": "medium",
        "category": "Account Structure",
        "pass": "Location option set to Presence",
        "warning": "",
        "fail": "Presence or interest targeting on local campaigns",
    },
    # Keywords & Quality Score (15%)
    {
        "id": "G21",
        "check": "Low Quality Score keywords",
        "severity": "critical",
        "category": "Keywords & Quality Score",
        "pass": "<10% of keywords with Quality Score ≤4",
        "warning": "10-25% of keywords with Quality Score ≤4",
        "fail": ">25% of keywords with Quality Score ≤4",
    },
    {
        "id": "G22",
        "check": "Expected CTR component",
        "severity": "medium",
        "category": "Keywords & Quality Score",
        "pass": "Top keywords at or above average expected CTR",
        "warning": "Mixed expected CTR on top keywords",
        "fail": "Most top keywords below average expected CTR",
    },
    {
        "id": "G24",
        "check": "Zero-conversion keywords",
        "severity": "high",
        "category": "Keywords & Quality Score",
        "pass": "No keyword with spend >2x target CPA and zero conversions",
        "warning": "1-3 keywords over the threshold",
        "fail": ">3 keywords spending >2x target CPA without conversions",
    },
    # Ads & Assets (15%)
    {
        "id": "G30",
        "check": "RSA Ad Strength",
        "severity": "high",
        "category": "Ads & Assets",
        "pass": "All RSAs Good or Excellent",
        "warning": "Some RSAs rated Average",
        "fail": "Majority of RSAs rated Poor",
    },
    {
        "id": "G31",
        "check": "PMax asset density",
        "severity": "medium",
        "category": "Ads & Assets",
        "pass": "Every asset group has images, videos and logos",
        "warning": "Missing video in some asset groups",
        "fail": "Asset groups missing images or logos",
    },
    {
        "id": "G33",
        "check": "Ad copy freshness",
        "severity": "low",
        "category": "Ads & Assets",
        "pass": "New ad copy tested in the last 90 days",
        "warning": "Last test 90-180 days ago",
        "fail": "No new ad copy in 180 days",
    },
    # Settings & Targeting (10%)
    {
        "id": "G55",
        "check": "Sitelinks and callouts",
        "severity": "medium",
        "category": "Settings & Targeting",
        "pass": "≥4 sitelinks and ≥4 callouts on every Search campaign",
        "warning": "Assets on some campaigns",
        "fail": "No sitelinks or callouts",
    },
    {
        "id": "G57",
        "check": "Customer Match lists",
        "severity": "high",
        "category": "Settings & Targeting",
        "pass": "Customer Match lists uploaded and refreshed monthly",
        "warning": "Lists uploaded but older than 90 days",
        "fail": "No Customer Match lists uploaded",
    },
    {
        "id": "G58",
        "check": "Placement exclusions",
        "severity": "low",
        "category": "Settings & Targeting",
        "pass": "Account-level placement exclusions for apps and low-quality sites",
        "warning": "Exclusions on some campaigns",
        "fail": "No placement exclusions",
    },
]
