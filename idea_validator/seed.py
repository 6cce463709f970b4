import logging
import random
import click
from . import db
from .models import BusinessIdea, STATUS_PENDING, STATUS_ANALYZING, STATUS_COMPLETED

logger = logging.getLogger(__name__)

SAMPLE_IDEAS = [
    "A mobile app that connects dog owners for playdates and walking groups in local neighborhoods.",
    "An AI-powered meal planning service that creates shopping lists and recipes based on dietary restrictions and preferences.",
    "A subscription box service for indoor plants with care instructions and plant health monitoring tools.",
    "A platform for freelance developers to find short-term coding projects and collaborate on open source initiatives.",
    "A virtual reality fitness app that gamifies workouts with immersive environments and multiplayer challenges.",
]

SAMPLE_TITLES = [
    "PupPlay - Dog Social Network",
    "MealMind AI",
    "PlantBox Subscription",
    "DevConnect Platform",
    "FitVR Gaming",
]


def sample_analysis(rng):
    return {
        "market_demand": {
            "score": rng.randint(6, 9),
            "pros": ["Growing pet industry", "Strong community aspect", "High user engagement potential"],
            "cons": ["Seasonal variations", "Local market dependency"],
        },
        "feasibility": {
            "score": rng.randint(5, 8),
            "pros": ["Available technology", "Clear development path"],
            "cons": ["Location services complexity", "User acquisition challenges"],
        },
        "profitability": {
            "score": rng.randint(4, 8),
            "pros": ["Multiple revenue streams", "Subscription potential"],
            "cons": ["High customer acquisition cost", "Competitive market"],
        },
        "uniqueness": {
            "score": rng.randint(5, 9),
            "pros": ["Novel approach", "Untapped niche"],
            "cons": ["Easy to replicate", "Limited differentiation"],
        },
        "scalability": {
            "score": rng.randint(6, 9),
            "pros": ["Network effects", "Digital platform"],
            "cons": ["Local market focus", "Quality control challenges"],
        },
        "risk_assessment": {
            "score": rng.randint(5, 8),
            "pros": ["Low technical risk", "Proven business model"],
            "cons": ["Market saturation risk", "Regulatory considerations"],
        },
        "recommendations": [
            "Create a minimum viable product (MVP) to test core assumptions with real users",
        ],
    }


def make_sample_idea(status=None, rng=None, **overrides):
    """Build an unsaved BusinessIdea filled with sample data.

    Ideas that are not completed carry no analysis and no score.
    """
    rng = rng or random.Random()
    status = status or rng.choice([STATUS_PENDING, STATUS_ANALYZING, STATUS_COMPLETED])

    fields = {
        "description": rng.choice(SAMPLE_IDEAS),
        "title": rng.choice(SAMPLE_TITLES),
        "status": status,
        "analysis": None,
        "overall_score": None,
    }
    if status == STATUS_COMPLETED:
        fields["analysis"] = sample_analysis(rng)
        fields["overall_score"] = round(rng.uniform(5.0, 9.0), 1)

    fields.update(overrides)
    return BusinessIdea(**fields)


def seed_ideas(completed=8, pending=2, rng=None):
    rng = rng or random.Random()
    ideas = [make_sample_idea(STATUS_COMPLETED, rng) for _ in range(completed)]
    ideas += [make_sample_idea(STATUS_PENDING, rng) for _ in range(pending)]

    db.session.add_all(ideas)
    db.session.commit()
    logger.info(f"Seeded {completed} completed and {pending} pending ideas")
    return ideas


def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create all database tables."""
        db.create_all()
        click.echo("✅ Database tables created.")

    @app.cli.command("seed")
    @click.option("--completed", default=8, show_default=True, help="Completed ideas to insert.")
    @click.option("--pending", default=2, show_default=True, help="Pending ideas to insert.")
    def seed_command(completed, pending):
        """Insert sample business ideas."""
        db.create_all()
        seed_ideas(completed=completed, pending=pending)
        click.echo(f"✅ Seeded {completed + pending} business ideas.")
