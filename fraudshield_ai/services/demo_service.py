"""
Canned demo content for the UI: sample messages and scripted calls.
Unknown kinds fall back to the safe sample.
"""

from typing import Any, Dict, List


DEMO_KINDS = ("safe", "suspicious", "fraud")

DEMO_MESSAGES: Dict[str, str] = {
    "safe": (
        "Hi! Just wanted to let you know I'll be home late today. "
        "Don't wait for dinner. See you soon!"
    ),
    "suspicious": (
        "Your bank account has been temporarily locked due to suspicious activity. "
        "Please verify your account details by clicking this link: http://verify-account-now.xyz"
    ),
    "fraud": (
        "CONGRATULATIONS!!! You have WON $1,000,000 in our lottery! To claim your prize, "
        "send $500 processing fee IMMEDIATELY to account 1234567890. URGENT - Offer expires "
        "in 24 hours! Click here NOW: http://claim-prize-winner.com"
    ),
}

CALL_SIMULATIONS: Dict[str, Dict[str, Any]] = {
    "safe": {
        "caller": "Mom",
        "steps": [
            {"type": "caller", "text": "Hello? Hi dear, it's Mom."},
            {"type": "ai-status", "text": "AI: Background noise normal. Voice match: High correlation with 'Mom'."},
            {"type": "caller", "text": "I was just calling to check if you remember your cousin's wedding is this Saturday?"},
            {"type": "ai-status", "text": "AI: Conversational context detected. No fraud indicators."},
            {"type": "caller", "text": "Call me back when you have a minute. Love you, bye!"},
        ],
    },
    "suspicious": {
        "caller": "Microsoft Tech Support",
        "steps": [
            {"type": "caller", "text": "Hello, I am calling from Microsoft Technical Support Department."},
            {"type": "ai-status", "text": "AI: Potential impersonation. Microsoft rarely initiates support calls."},
            {"type": "caller", "text": "We have detected a serious virus on your Windows computer that is stealing your files."},
            {"type": "ai-status", "text": "AI: Creating fear/panic. Suspicious claim."},
            {"type": "caller", "text": "To fix this, I need you to go to your computer and download a remote access tool so I can help you."},
            {"type": "ai-status", "text": "AI: Request for remote access. High risk indicator."},
        ],
    },
    "fraud": {
        "caller": "HDFC Bank Security",
        "steps": [
            {"type": "caller", "text": "Urgent call from HDFC Bank Security. This is an automated alert."},
            {"type": "ai-status", "text": "AI: Automated urgency tactic detected."},
            {"type": "caller", "text": "Your debit card ending in 4592 has been used for a transaction of ₹45,000 at a jeweler in Dubai."},
            {"type": "ai-status", "text": "AI: High-value transaction claim. Financial pressure."},
            {"type": "caller", "text": "If you did not authorize this, press 1 now to speak with an agent. You will need to verify your PIN."},
            {"type": "ai-status", "text": "AI: Request for PIN via phone. DEFINITE FRAUD ATTEMPT."},
        ],
    },
}


def resolve_kind(kind: str) -> str:
    kind = (kind or "").lower()
    return kind if kind in DEMO_KINDS else "safe"


def get_demo_message(kind: str) -> str:
    return DEMO_MESSAGES[resolve_kind(kind)]


def get_call_simulation(kind: str) -> Dict[str, Any]:
    simulation = CALL_SIMULATIONS[resolve_kind(kind)]
    steps: List[Dict[str, str]] = [dict(step) for step in simulation["steps"]]
    return {"caller": simulation["caller"], "steps": steps}


def caller_transcript(kind: str) -> str:
    """Caller lines of a simulated call joined into one transcript."""
    simulation = CALL_SIMULATIONS[resolve_kind(kind)]
    return " ".join(step["text"] for step in simulation["steps"] if step["type"] == "caller")
