from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_mail import Mail
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from graduates.bus import CommandBus, EventBus, QueryBus


db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)
mail = Mail()

query_bus = QueryBus()
command_bus = CommandBus()
event_bus = EventBus()
