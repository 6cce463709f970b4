from datetime import datetime, timezone
from flask import Blueprint, render_template, request, jsonify, redirect, url_for, flash
import logging
from . import db
from .models import BusinessIdea, STATUS_ANALYZING, STATUS_COMPLETED, STATUS_FAILED
from .analysis import BusinessIdeaAnalysisService
from .forms import validate_submission

# -------------------------------------------------------------------
# Blueprint & Logging
# -------------------------------------------------------------------
main = Blueprint("main", __name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

analysis_service = BusinessIdeaAnalysisService()

RECENT_IDEAS_LIMIT = 5
HISTORY_LIMIT = 10


def recent_completed_ideas(limit):
    return (
        BusinessIdea.query
        .filter_by(status=STATUS_COMPLETED)
        .order_by(BusinessIdea.created_at.desc(), BusinessIdea.id.desc())
        .limit(limit)
        .all()
    )

# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@main.route("/")
def index():
    recent = [idea.to_summary() for idea in recent_completed_ideas(RECENT_IDEAS_LIMIT)]
    return render_template("index.html", recent_ideas=recent, form={}, errors={})

# -------------------------------------------------------------------
# Analyze Idea Route
# -------------------------------------------------------------------
@main.route("/analyze", methods=["POST"])
def analyze():
    wants_json = request.is_json
    payload = request.get_json(silent=True) if wants_json else request.form
    if not hasattr(payload, "get"):
        payload = {}

    data, errors = validate_submission(payload)
    if errors:
        logger.info(f"Rejected idea submission: {sorted(errors)}")
        if wants_json:
            return jsonify({"errors": errors}), 422
        recent = [idea.to_summary() for idea in recent_completed_ideas(RECENT_IDEAS_LIMIT)]
        return render_template("index.html", recent_ideas=recent, form=data, errors=errors), 422

    # 💾 STEP 1: Store the submission
    idea = BusinessIdea(description=data["description"], title=data["title"], status=STATUS_ANALYZING)
    try:
        db.session.add(idea)
        db.session.commit()
    except Exception as e:
        logger.error(f"Database insert failed: {e}")
        db.session.rollback()
        raise

    # 🧮 STEP 2: Score it
    try:
        analysis = analysis_service.analyze(idea.description)
        overall_score = analysis_service.calculate_overall_score(analysis)
    except Exception:
        logger.exception(f"Analysis failed for idea {idea.id}")
        idea.status = STATUS_FAILED
        try:
            db.session.commit()
        except Exception as e:
            logger.error(f"Could not mark idea {idea.id} as failed: {e}")
            db.session.rollback()
            raise
        if wants_json:
            return jsonify({"error": "Analysis failed", "id": idea.id}), 500
        flash("We could not analyze your idea. Please try again.", "error")
        return redirect(url_for("main.index"))

    # ✅ STEP 3: Update in place
    idea.analysis = analysis
    idea.overall_score = overall_score
    idea.status = STATUS_COMPLETED
    try:
        db.session.commit()
    except Exception as e:
        logger.error(f"Database update failed for idea {idea.id}: {e}")
        db.session.rollback()
        raise

    logger.info(f"Idea {idea.id} analyzed, overall score {overall_score}")

    report = idea.to_report("Your Business Idea")
    if wants_json:
        return jsonify(report)
    return render_template("result.html", idea=report)

# -------------------------------------------------------------------
# Show Idea Route
# -------------------------------------------------------------------
@main.route("/idea/<int:idea_id>")
def show(idea_id):
    idea = db.get_or_404(BusinessIdea, idea_id)

    if not idea.is_completed:
        flash("This business idea analysis is not yet complete.", "error")
        return redirect(url_for("main.index"))

    return render_template("result.html", idea=idea.to_report("Business Idea Analysis"))

# -------------------------------------------------------------------
# History Route
# -------------------------------------------------------------------
@main.route("/history", methods=["GET"])
def history():
    return jsonify([idea.to_summary() for idea in recent_completed_ideas(HISTORY_LIMIT)])


@main.route("/health-check")
def health_check():
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
