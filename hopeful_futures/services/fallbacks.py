"""Hand-authored substitute content used whenever Gemini is unavailable or fails.

Nothing here raises: these functions are the terminal safety net.
"""

import random
from typing import List, Optional

from hopeful_futures import config
from hopeful_futures.schemas.job_listing import JobListing
from hopeful_futures.schemas.simplified_job import Provider, SimplifiedJob, Tone
from hopeful_futures.schemas.training_plan import TrainingPhase, TrainingPlan, TrainingResource
from hopeful_futures.utils.helpers import new_job_id, normalize_location

# (title, employer, description, pay)
JOB_TEMPLATES = (
    (
        "Customer Service Representative",
        "Community Support Services",
        "Answer phone calls and assist customers with inquiries. This position offers flexible scheduling and can accommodate various physical needs. Training provided on-site.",
        "$16/hr · 20-30 hrs/week",
    ),
    (
        "Data Entry Clerk",
        "Local Business Solutions",
        "Enter data into computer systems from paper documents. This is a seated position with minimal physical requirements. Perfect for those who prefer desk work.",
        "$15/hr · Full-time",
    ),
    (
        "Retail Associate",
        "Neighborhood Store",
        "Help customers find products and process transactions at the register. Flexible hours available. Accommodations can be made for standing or mobility needs.",
        "$14-17/hr · Part-time or Full-time",
    ),
    (
        "Security Guard",
        "SafeGuard Services",
        "Monitor premises and ensure safety. Positions available for both standing and seated roles. Training and certification assistance provided.",
        "$18/hr · Various shifts",
    ),
    (
        "Janitorial Staff",
        "CleanWorks Inc.",
        "Maintain cleanliness of office buildings. Flexible scheduling with both day and evening shifts. Accommodations available for physical limitations.",
        "$15-18/hr · Part-time",
    ),
    (
        "Receptionist",
        "Medical Office Group",
        "Greet visitors, answer phones, and schedule appointments. Comfortable seated position with friendly work environment. No heavy lifting required.",
        "$17/hr · Full-time",
    ),
    (
        "Warehouse Associate",
        "Distribution Center",
        "Sort and organize inventory. Both light-duty and standard positions available. Accommodations made for physical needs and scheduling preferences.",
        "$16-19/hr · Full-time",
    ),
    (
        "Delivery Driver Helper",
        "Local Delivery Service",
        "Assist delivery drivers with loading and unloading packages. Flexible hours and routes. Can accommodate various physical capabilities.",
        "$17/hr · Part-time",
    ),
    (
        "Remote Customer Support",
        "Tech Support Solutions",
        "Provide technical support via phone and chat from home. Fully remote position with flexible hours. Perfect for those with mobility needs.",
        "$16/hr · Full-time or Part-time",
    ),
    (
        "Maintenance Helper",
        "Property Management Co.",
        "Assist with light maintenance tasks around apartment buildings. Training provided. Accommodations available for physical limitations.",
        "$18/hr · Full-time",
    ),
)


def fallback_job_listings(
    location: str,
    count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[JobListing]:
    """Pick `count` (default 5) templates at random, placed in the given city/state."""
    count = config.FALLBACK_JOB_COUNT if count is None else count
    rng = rng or random.Random()
    place = normalize_location(location)
    templates = list(JOB_TEMPLATES)
    rng.shuffle(templates)
    return [
        JobListing(
            id=new_job_id(index),
            title=title,
            employer=employer,
            description=description,
            pay=pay,
            location=place,
        )
        for index, (title, employer, description, pay) in enumerate(templates[:count], start=1)
    ]


def fallback_simplified_job() -> SimplifiedJob:
    return SimplifiedJob(
        job_title="Community Support Assistant",
        simplified_description=(
            "Help a neighborhood non-profit greet visitors, keep things tidy, and guide people "
            "to the right staff. The role is seated most of the day and allows short stretch "
            "breaks whenever you need them."
        ),
        key_qualifications=[
            "Friendly, patient communication style",
            "Comfort using a tablet checklist (training provided)",
            "Reliable attendance for a 4-hour weekday shift",
        ],
        accommodations=[
            "Adjustable chair with lumbar support",
            "Frequent micro-breaks to manage pain or fatigue",
            "Clear written instructions for every shift task",
        ],
        training_suggestions=[
            "Watch a 15-minute video on welcoming clients with trauma-informed language",
            "Practice basic tablet navigation using the provided tutorial mode",
            "Shadow another assistant for the first two shifts",
        ],
        tone=Tone.ENCOURAGING,
        provider=Provider.FALLBACK,
    )


def fallback_training_phases() -> List[TrainingPhase]:
    return [
        TrainingPhase(
            title="Foundation & Confidence",
            duration="Week 1-2",
            focus="Rebuild routine, refresh customer service basics, and set attainable goals.",
            steps=[
                "Spend 20 minutes per day on breathing or stretching to reduce stress.",
                "Complete a short online module on customer empathy and clear communication.",
                "Practice a friendly greeting script with a friend or mentor twice a week.",
            ],
            resources=[
                TrainingResource(
                    title="Coursera: Customer Service Fundamentals (audit option)",
                    url="https://www.coursera.org/learn/customer-service-fundamentals",
                    cost="Free audit",
                ),
                TrainingResource(
                    title="YouTube: 10-Minute Chair Stretches",
                    url="https://www.youtube.com/results?search_query=chair+stretches",
                ),
            ],
        ),
        TrainingPhase(
            title="Job-Specific Skills",
            duration="Week 3-4",
            focus="Practice scheduling, note taking, and simple digital check-ins.",
            steps=[
                "Use Google Calendar to plan two mock shifts each week.",
                "Shadow a volunteer coordinator or watch recordings of front desk workflows.",
                "Complete a short typing or data-entry drill every other day (10 minutes).",
            ],
            resources=[
                TrainingResource(
                    title="GCF LearnFree: Google Workspace Basics",
                    url="https://edu.gcfglobal.org/en/subjects/google/",
                ),
                TrainingResource(title="Keybr: Gentle typing practice", url="https://www.keybr.com/"),
            ],
        ),
        TrainingPhase(
            title="Interview & Placement",
            duration="Week 5",
            focus="Prepare simple talking points, practice disclosing accommodations, and line up opportunities.",
            steps=[
                "Write a 2-minute story highlighting reliability and empathy.",
                "Role-play an interview with a coach focusing on accessibility needs.",
                "Apply to two community-based roles that match your preferred schedule.",
            ],
            resources=[
                TrainingResource(
                    title="Workability I: Interview prep workbook",
                    url="https://www.dor.ca.gov/Home/Workability",
                ),
            ],
        ),
    ]


FALLBACK_SUMMARY = (
    "Focus on light-duty roles such as front desk support or retail greeter. Build confidence "
    "with people-facing tasks and refresh essential digital skills at a relaxed pace."
)
FALLBACK_SUCCESS_METRICS = (
    "Able to greet visitors confidently without relying on a script",
    "Completes mock check-in tasks in under 5 minutes",
    "Identifies at least two accommodations to request during onboarding",
)
FALLBACK_ENCOURAGEMENT = (
    "Progress is steady and flexible. Celebrate each small win and rest when needed. "
    "You're building skills employers value every day."
)


def fallback_training_plan() -> TrainingPlan:
    return TrainingPlan(
        summary=FALLBACK_SUMMARY,
        phases=fallback_training_phases(),
        success_metrics=list(FALLBACK_SUCCESS_METRICS),
        encouragement=FALLBACK_ENCOURAGEMENT,
        provider=Provider.FALLBACK,
    )
