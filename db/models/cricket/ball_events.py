"""
Ball-level tables. High cardinality, loaded in bulk rather than row by row.

Batsman/bowler columns hold the feed's player ids (Player.pid), not the
surrogate Player.id.
"""

from peewee import AutoField, BooleanField, CharField, FloatField, ForeignKeyField, IntegerField, TextField

from db.base import BaseModel
from db.models.cricket.matches import Match
from db.models.cricket.scorecards import Innings

ZONE_NAMES = ["Fine Leg", "Square Leg", "Mid Wicket", "Long on", "Long of", "Cover", "Point", "3rd man"]


class WagonWheel(BaseModel):
    id = AutoField()
    match = ForeignKeyField(Match, backref="wagon_wheels", on_delete="CASCADE")
    innings = ForeignKeyField(Innings, backref="wagon_wheels", on_delete="CASCADE")
    batsman_pid = IntegerField(null=True, index=True)
    bowler_pid = IntegerField(null=True)
    over = FloatField(default=0)
    bat_run = IntegerField(default=0)
    team_run = IntegerField(default=0)
    x_coord = IntegerField(default=0)
    y_coord = IntegerField(default=0)
    zone_id = IntegerField(default=0)
    zone_name = CharField(max_length=50, null=True)
    event_name = CharField(max_length=50, default="")
    unique_over = FloatField(default=0)

    class Meta:
        table_name = "wagon_wheels"


class Commentary(BaseModel):
    id = AutoField()
    event_id = CharField(max_length=100, unique=True)
    match = ForeignKeyField(Match, backref="commentaries", on_delete="CASCADE")
    innings = ForeignKeyField(Innings, backref="commentaries", on_delete="CASCADE")
    event = CharField(max_length=50, default="ball")
    batsman_pid = IntegerField(null=True)
    bowler_pid = IntegerField(null=True)
    over = IntegerField(default=0)
    ball = IntegerField(default=0)
    commentary = TextField(default="")
    run = IntegerField(default=0)
    is_wide = BooleanField(default=False)
    is_no_ball = BooleanField(default=False)
    is_six = BooleanField(default=False)
    is_four = BooleanField(default=False)
    is_wicket = BooleanField(default=False)

    class Meta:
        table_name = "commentaries"
        indexes = ((("match", "over", "ball"), False),)
