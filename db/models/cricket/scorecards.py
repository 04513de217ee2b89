"""
Scorecard tables: one innings per batting side, with per-player batting and
bowling lines and the ordered fall-of-wicket list.
"""

from peewee import (
    AutoField,
    BooleanField,
    CharField,
    FloatField,
    ForeignKeyField,
    IntegerField,
)

from db.base import BaseModel
from db.models.cricket.matches import Match
from db.models.cricket.players import Player
from db.models.cricket.teams import Team


class Innings(BaseModel):
    id = AutoField()
    iid = IntegerField(unique=True)
    match = ForeignKeyField(Match, backref="innings", on_delete="CASCADE")
    number = IntegerField()
    name = CharField(max_length=255, null=True)
    status = IntegerField(null=True)
    is_super_over = BooleanField(default=False)
    result = IntegerField(null=True)
    batting_team = ForeignKeyField(Team, backref="batting_innings")
    fielding_team = ForeignKeyField(Team, backref="fielding_innings")
    scores = CharField(max_length=50, null=True)
    scores_full = CharField(max_length=100, null=True)
    runs = IntegerField(default=0)
    wickets = IntegerField(default=0)
    overs = FloatField(default=0)

    class Meta:
        table_name = "innings"

    @classmethod
    def by_iid(cls, iid) -> "Innings | None":
        if iid is None:
            return None
        try:
            iid = int(iid)
        except (TypeError, ValueError):
            return None
        return cls.get_or_none(cls.iid == iid)

    @classmethod
    def upsert_innings(cls, iid: int, data: dict) -> "Innings":
        return cls.upsert({"iid": iid}, data)


class BattingLine(BaseModel):
    id = AutoField()
    innings = ForeignKeyField(Innings, backref="batting_lines", on_delete="CASCADE")
    player = ForeignKeyField(Player, backref="batting_lines")
    name = CharField(max_length=255, null=True)
    position = IntegerField()
    runs = IntegerField(default=0)
    balls_faced = IntegerField(default=0)
    fours = IntegerField(default=0)
    sixes = IntegerField(default=0)
    strike_rate = FloatField(default=0)
    how_out = CharField(max_length=255, null=True)
    dismissal = CharField(max_length=50, null=True)
    bowler_pid = IntegerField(null=True)
    is_batting = BooleanField(default=False)

    class Meta:
        table_name = "batting_lines"
        indexes = ((("innings", "player"), True),)

    @classmethod
    def upsert_line(cls, innings: Innings, player: Player, data: dict) -> "BattingLine":
        return cls.upsert({"innings": innings, "player": player}, data)


class BowlingLine(BaseModel):
    id = AutoField()
    innings = ForeignKeyField(Innings, backref="bowling_lines", on_delete="CASCADE")
    player = ForeignKeyField(Player, backref="bowling_lines")
    name = CharField(max_length=255, null=True)
    overs = FloatField(default=0)
    runs_conceded = IntegerField(default=0)
    wickets = IntegerField(default=0)
    maidens = IntegerField(default=0)
    no_balls = IntegerField(default=0)
    wides = IntegerField(default=0)
    economy = FloatField(default=0)
    dot_balls = IntegerField(null=True)

    class Meta:
        table_name = "bowling_lines"
        indexes = ((("innings", "player"), True),)

    @classmethod
    def upsert_line(cls, innings: Innings, player: Player, data: dict) -> "BowlingLine":
        return cls.upsert({"innings": innings, "player": player}, data)


class FallOfWicket(BaseModel):
    id = AutoField()
    innings = ForeignKeyField(Innings, backref="fall_of_wickets", on_delete="CASCADE")
    name = CharField(max_length=255, null=True)
    runs = IntegerField(default=0)
    overs = FloatField(default=0)
    score = CharField(max_length=20, null=True)

    class Meta:
        table_name = "fall_of_wickets"
