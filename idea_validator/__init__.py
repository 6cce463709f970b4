from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from dotenv import load_dotenv
import logging
import os

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize SQLAlchemy
db = SQLAlchemy()
migrate = Migrate()

def create_app(test_config=None):
    app = Flask(__name__)

    # 🔹 Database + session configuration
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv("DATABASE_URL", "sqlite:///business_ideas.db")
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['SECRET_KEY'] = os.getenv("SECRET_KEY", "dev-secret-key")

    if test_config:
        app.config.update(test_config)

    # Initialize database and migrations
    db.init_app(app)
    migrate.init_app(app, db)  # enables flask db commands

    # Import models AFTER db init
    from .models import BusinessIdea

    # Register Blueprints
    from .routes import main
    app.register_blueprint(main)

    from .seed import register_commands
    register_commands(app)

    logger.info(f"Connected to Database: {app.config['SQLALCHEMY_DATABASE_URI']}")

    return app
