# pages.py
from flask import Blueprint, render_template

import content
from errors import subtree_boundary
from extensions import built_once

pages_bp = Blueprint("pages", __name__)
pages_bp.register_error_handler(Exception, subtree_boundary)


@pages_bp.route("/")
@built_once
def home():
    return render_template("home.html", features=content.FEATURES, impact=content.IMPACT)


@pages_bp.route("/about")
@built_once
def about():
    return render_template("about.html", steps=content.STEPS, stakeholders=content.STAKEHOLDERS)


@pages_bp.route("/education")
@built_once
def education():
    return render_template(
        "education.html",
        categories=content.WASTE_CATEGORIES,
        practices=content.BEST_PRACTICES,
    )


@pages_bp.route("/faq")
@built_once
def faq():
    return render_template("faq.html", faqs=content.FAQS)
