import logging
import random
from decimal import Decimal, ROUND_HALF_UP
import numpy as np

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Keyword tables
# -------------------------------------------------------------------
TECH_KEYWORDS = ["app", "ai", "platform", "software", "digital", "online", "mobile", "web", "saas", "api"]
SERVICE_KEYWORDS = ["service", "consulting", "coaching", "training", "support", "maintenance"]
PRODUCT_KEYWORDS = ["product", "goods", "merchandise", "item", "subscription", "box"]
SOCIAL_KEYWORDS = ["social", "community", "network", "connect", "share", "collaborate"]

CRITERIA = [
    "market_demand",
    "feasibility",
    "profitability",
    "uniqueness",
    "scalability",
    "risk_assessment",
]

# Weights in hundredths so the weighted sum stays exact
CRITERIA_WEIGHTS = {
    "market_demand": 25,
    "feasibility": 20,
    "profitability": 20,
    "uniqueness": 15,
    "scalability": 15,
    "risk_assessment": 5,
}

MAX_SCORE = 10

# Score-band recommendations: (low, high) per criterion
BAND_RECOMMENDATIONS = {
    "market_demand": (
        [
            "Conduct extensive market research to identify target demographics and validate actual market demand for your solution",
            "Survey potential customers to understand their pain points and willingness to pay",
            "Analyze competitor products and identify gaps in the current market offerings",
        ],
        [
            "Leverage the strong market demand by accelerating your go-to-market strategy",
            "Consider expanding to adjacent markets with similar demand patterns",
        ],
    ),
    "feasibility": (
        [
            "Develop a detailed technical roadmap breaking down implementation into manageable phases",
            "Create a proof-of-concept to validate the most challenging technical assumptions",
            "Identify key technical partners or hire specialized talent to address feasibility gaps",
        ],
        [
            "Fast-track development given the high feasibility - consider agile development methodologies",
        ],
    ),
    "profitability": (
        [
            "Re-evaluate your revenue model and explore diverse pricing strategies (freemium, subscription, usage-based)",
            "Conduct detailed cost analysis to identify areas for optimization and margin improvement",
            "Consider strategic partnerships that could reduce costs or increase revenue potential",
        ],
        [
            "Maximize the strong profitability potential by optimizing your pricing strategy and cost structure",
        ],
    ),
    "uniqueness": (
        [
            "Innovate on existing solutions by adding unique features or pivot to a more distinct value proposition",
            "Focus on superior execution and customer experience as differentiators",
            "Consider targeting a specific niche market where you can establish a unique position",
        ],
        [
            "Protect your unique advantages through patents, trade secrets, or first-mover advantage",
            "Build strong brand recognition around your innovative approach",
        ],
    ),
    "scalability": (
        [
            "Design a scalable infrastructure and operational plan for future growth from day one",
            "Identify key bottlenecks that could limit scaling and develop solutions early",
            "Consider automation opportunities to reduce human dependency as you scale",
        ],
        [
            "Prepare for rapid scaling by building robust systems and processes that can handle growth",
            "Consider geographic expansion strategies to leverage your scalability advantages",
        ],
    ),
}

HIGH_RISK_RECOMMENDATIONS = [
    "Identify and actively mitigate key risks - consider starting with a smaller pilot program to reduce exposure",
    "Develop contingency plans for major risk scenarios (technical failures, market changes, competition)",
    "Consider diversifying your approach or building in flexibility to pivot if needed",
]
LOW_RISK_RECOMMENDATION = "Take advantage of the low-risk profile by being more aggressive in your market entry strategy"

MVP_FOLLOWUP = "Create a minimum viable product (MVP) to test and validate your improvements"
MVP_BASELINE = "Create a minimum viable product (MVP) to test core assumptions with real users"
BUSINESS_PLAN = "Develop a comprehensive business plan with detailed financial projections"


def contains_keywords(text, keywords):
    """True when any keyword occurs in text as a plain substring."""
    return any(keyword in text for keyword in keywords)


class BusinessIdeaAnalysisService:
    """
    Rule-based evaluator for business ideas.

    Each of the six criteria starts from a base score inside a fixed range and
    is nudged up or down by keyword categories found in the description. The
    base scores come from a generator seeded with the description itself, so
    re-analyzing the same text always gives the same report.
    """

    def analyze(self, description):
        text = (description or "").lower()
        keywords = self.extract_keywords(text)
        rng = random.Random(text)

        analysis = {
            "market_demand": self._market_demand(text, keywords, rng),
            "feasibility": self._feasibility(text, keywords, rng),
            "profitability": self._profitability(text, keywords, rng),
            "uniqueness": self._uniqueness(text, keywords, rng),
            "scalability": self._scalability(text, keywords, rng),
            "risk_assessment": self._risk_assessment(text, keywords, rng),
        }
        scores = {name: analysis[name]["score"] for name in CRITERIA}
        analysis["recommendations"] = self.generate_recommendations(text, keywords, scores)

        logger.debug(f"Keyword categories {keywords} -> scores {scores}")
        return analysis

    def extract_keywords(self, text):
        return {
            "is_tech": contains_keywords(text, TECH_KEYWORDS),
            "is_service": contains_keywords(text, SERVICE_KEYWORDS),
            "is_product": contains_keywords(text, PRODUCT_KEYWORDS),
            "is_social": contains_keywords(text, SOCIAL_KEYWORDS),
        }

    # -------------------------------------------------------------------
    # Criteria
    # -------------------------------------------------------------------
    @staticmethod
    def _result(score, pros, cons):
        return {"score": min(MAX_SCORE, score), "pros": pros, "cons": cons}

    def _market_demand(self, text, keywords, rng):
        score = rng.randint(5, 8)
        pros = ["Identifies a real market need", "Target audience is clearly defined"]
        cons = ["Market size may be limited", "Seasonal demand variations possible"]

        if keywords["is_tech"]:
            score += 1
            pros.append("Growing digital market demand")
        if keywords["is_social"]:
            pros.append("Strong network effects potential")
            cons.append("User acquisition can be challenging initially")

        return self._result(score, pros, cons)

    def _feasibility(self, text, keywords, rng):
        score = rng.randint(6, 8)
        pros = ["Clear execution path", "Required resources are available"]
        cons = ["Implementation complexity", "Time to market considerations"]

        if keywords["is_tech"]:
            cons.append("Technical expertise required")
            pros.append("Scalable technology foundation")
        if keywords["is_service"]:
            pros.append("Lower initial investment required")
            score += 1

        return self._result(score, pros, cons)

    def _profitability(self, text, keywords, rng):
        score = rng.randint(5, 7)
        pros = ["Multiple revenue stream opportunities", "Scalable business model"]
        cons = ["Customer acquisition costs", "Competition pressure on pricing"]

        if "subscription" in text:
            score += 2
            pros.append("Recurring revenue model")
        if keywords["is_product"]:
            cons.append("Inventory and logistics costs")

        return self._result(score, pros, cons)

    def _uniqueness(self, text, keywords, rng):
        score = rng.randint(4, 8)
        pros = ["Novel approach to existing problem", "Potential for differentiation"]
        cons = ["Similar solutions exist", "Easy to replicate concept"]

        if "ai" in text or "artificial intelligence" in text:
            score += 1
            pros.append("Leverages cutting-edge technology")

        return self._result(score, pros, cons)

    def _scalability(self, text, keywords, rng):
        score = rng.randint(6, 8)
        pros = ["Digital scalability potential", "Automation opportunities"]
        cons = ["Quality control at scale", "Resource constraints"]

        if keywords["is_tech"]:
            score += 1
            pros.append("Technology enables rapid scaling")
        if keywords["is_service"] and not keywords["is_tech"]:
            score -= 1
            cons.append("Human resource scaling challenges")

        return self._result(score, pros, cons)

    def _risk_assessment(self, text, keywords, rng):
        score = rng.randint(5, 8)
        pros = ["Manageable risk profile", "Clear mitigation strategies"]
        cons = ["Market uncertainty", "Competitive threats"]

        if keywords["is_tech"]:
            cons.append("Technology obsolescence risk")
            cons.append("Development timeline risks")

        return self._result(score, pros, cons)

    # -------------------------------------------------------------------
    # Recommendations
    # -------------------------------------------------------------------
    def generate_recommendations(self, text, keywords, scores):
        recommendations = []

        for criterion, (low, high) in BAND_RECOMMENDATIONS.items():
            if scores[criterion] < 5:
                recommendations.extend(low)
            elif scores[criterion] >= 8:
                recommendations.extend(high)

        if scores["risk_assessment"] > 7:
            recommendations.extend(HIGH_RISK_RECOMMENDATIONS)
        elif scores["risk_assessment"] <= 3:
            recommendations.append(LOW_RISK_RECOMMENDATION)

        if recommendations:
            recommendations.append(MVP_FOLLOWUP)
        else:
            recommendations.extend([MVP_BASELINE, BUSINESS_PLAN])

        # Keyword-based context
        if keywords["is_tech"]:
            if scores["feasibility"] < 6:
                recommendations.append(
                    "Build a technical prototype focusing on the core functionality before adding advanced features"
                )
            if scores["uniqueness"] >= 7:
                recommendations.append("Consider patent protection for your unique technical innovations")

        if keywords["is_social"] and scores["market_demand"] >= 6:
            recommendations.append(
                "Focus on building an initial community of highly engaged users who can drive viral growth"
            )
            recommendations.append(
                "Develop network effects and viral growth mechanisms to leverage social dynamics"
            )

        if keywords["is_service"] and scores["scalability"] < 6:
            recommendations.append(
                "Standardize your service delivery processes and create training materials for easier scaling"
            )

        if "subscription" in text and scores["profitability"] >= 6:
            recommendations.append(
                "Design strong customer retention strategies and churn reduction programs to maximize lifetime value"
            )

        # dedupe, keep first occurrence
        return list(dict.fromkeys(recommendations))

    # -------------------------------------------------------------------
    # Overall score
    # -------------------------------------------------------------------
    def calculate_overall_score(self, analysis):
        """Weighted sum of criterion scores, rounded to one decimal (0.0 - 10.0)."""
        present = [
            c for c in CRITERIA
            if isinstance(analysis.get(c), dict) and "score" in analysis[c]
        ]
        if not present:
            return 0.0

        scores = np.array([analysis[c]["score"] for c in present])
        weights = np.array([CRITERIA_WEIGHTS[c] for c in present])
        hundredths = Decimal(str(np.dot(scores, weights).item()))

        # half-up, so 7.25 -> 7.3
        total = (hundredths / 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return float(total)
