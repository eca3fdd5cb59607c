from ..models.scan import CrossCheckResource, GuidanceResponse, SecurityTip

SECURITY_TIPS: list[str] = [
    "Always verify company emails end with the official domain name, not public providers.",
    "Legitimate employers never ask for payment, processing fees, or crypto transfers.",
    "Question interviews done exclusively through chat apps like WhatsApp or Telegram.",
]

CROSS_CHECKS: list[tuple[str, str, str]] = [
    (
        "Glassdoor Reviews",
        "https://www.glassdoor.com/Reviews/index.htm",
        "Read employee reviews and interview reports for the hiring company.",
    ),
    (
        "Official Registry",
        "https://opencorporates.com/",
        "Confirm the company is a registered legal entity.",
    ),
]


def get_guidance() -> GuidanceResponse:
    return GuidanceResponse(
        tips=[SecurityTip(position=i, text=tip) for i, tip in enumerate(SECURITY_TIPS, start=1)],
        cross_checks=[
            CrossCheckResource(name=name, url=url, description=description)
            for name, url, description in CROSS_CHECKS
        ],
    )
