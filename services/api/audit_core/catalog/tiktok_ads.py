"""
TIKTOK ADS CHECKLIST
Creative-first checks covering Smart+, TikTok Shop and Spark Ads.
"""

PLATFORM = "tiktok-ads"
LABEL = "TikTok Ads"

CATEGORIES = [
    {
        "name": "Creative Strategy",
        "weight": 0.35,
        "check_count": 3,
        "description": "Native vertical video, hooks, trends and sound-on",
    },
    {
        "name": "Smart+ Campaigns",
        "weight": 0.25,
        "check_count": 2,
        "description": "Automated optimization and creative testing",
    },
    {
        "name": "TikTok Shop",
        "weight": 0.20,
        "check_count": 2,
        "description": "Product listings, live shopping and conversion tracking",
    },
    {
        "name": "Spark Ads",
        "weight": 0.20,
        "check_count": 2,
        "description": "Organic post boosting and creator collaborations",
    },
]

CHECKS = [
    {
        "id": "T01",
        "check": "Hook in first 2 seconds",
        "severity": "critical",
        "category": "Creative Strategy",
        "pass": "All active videos open with a hook in 2 seconds",
        "warning": "Hooks on some videos",
        "fail": "Slow intros on most videos",
    },
    {
        "id": "T02",
        "check": "Creative refresh rate",
        "severity": "high",
        "category": "Creative Strategy",
        "pass": "New creatives launched every 7-10 days",
        "warning": "Refreshed every 2-4 weeks",
        "fail": "No new creatives in 30 days",
    },
    {
        "id": "T03",
        "check": "Sound-on native format",
        "severity": "medium",
        "category": "Creative Strategy",
        "pass": "9:16 sound-on videos with captions",
        "warning": "Vertical but silent",
        "fail": "Repurposed horizontal ads",
    },
    {
        "id": "T06",
        "check": "Events API connected",
        "severity": "critical",
        "category": "Smart+ Campaigns",
        "pass": "Pixel and Events API both sending with deduplication",
        "warning": "Pixel only",
        "fail": "No TikTok Pixel",
    },
    {
        "id": "T07",
        "check": "Smart+ creative testing",
        "severity": "medium",
        "category": "Smart+ Campaigns",
        "pass": "Smart+ running with ≥10 creatives",
        "warning": "Smart+ with fewer than 5 creatives",
        "fail": "Smart+ never tested",
    },
    {
        "id": "T11",
        "check": "Shop catalog sync",
        "severity": "high",
        "category": "TikTok Shop",
        "pass": "Catalog synced daily with no disapprovals",
        "warning": "Disapprovals under 10%",
        "fail": "Catalog not synced",
    },
    {
        "id": "T12",
        "check": "LIVE shopping events",
        "severity": "low",
        "category": "TikTok Shop",
        "pass": "Monthly LIVE shopping sessions",
        "warning": "Occasional LIVE sessions",
        "fail": "No LIVE shopping",
    },
    {
        "id": "T15",
        "check": "Spark Ads authorization",
        "severity": "high",
        "category": "Spark Ads",
        "pass": "Creator posts authorized and running as Spark Ads",
        "warning": "Only brand-account posts boosted",
        "fail": "No Spark Ads",
    },
    {
        "id": "T16",
        "check": "Creator partnerships",
        "severity": "medium",
        "category": "Spark Ads",
        "pass": "≥3 active creator partnerships",
        "warning": "1-2 creators",
        "fail": "No creator content",
    },
]
