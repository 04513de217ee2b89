"""
Precomputed tournament-wide numbers: ranking rows per stat category for
batting and bowling, and one merged stats row per team.
"""

from peewee import AutoField, CharField, FloatField, ForeignKeyField, IntegerField

from db.base import BaseModel
from db.models.cricket.players import Player
from db.models.cricket.teams import Team


class BattingAggregate(BaseModel):
    id = AutoField()
    player = ForeignKeyField(Player, backref="batting_aggregates")
    team = ForeignKeyField(Team, backref="batting_aggregates")
    stat_type = CharField(max_length=50, index=True)
    matches = IntegerField(default=0)
    innings = IntegerField(default=0)
    runs = IntegerField(default=0)
    balls = IntegerField(default=0)
    not_out = IntegerField(default=0)
    highest = IntegerField(null=True)
    centuries = IntegerField(default=0)
    fifties = IntegerField(default=0)
    fours = IntegerField(default=0)
    sixes = IntegerField(default=0)
    catches = IntegerField(default=0)
    stumpings = IntegerField(default=0)
    average = FloatField(null=True)
    strike_rate = FloatField(null=True)

    class Meta:
        table_name = "batting_aggregates"
        indexes = ((("player", "stat_type"), True),)

    @classmethod
    def upsert_aggregate(cls, player: Player, stat_type: str, data: dict) -> "BattingAggregate":
        return cls.upsert({"player": player, "stat_type": stat_type}, data)


class BowlingAggregate(BaseModel):
    id = AutoField()
    player = ForeignKeyField(Player, backref="bowling_aggregates")
    team = ForeignKeyField(Team, backref="bowling_aggregates")
    stat_type = CharField(max_length=50, index=True)
    matches = IntegerField(default=0)
    overs = FloatField(default=0)
    runs = IntegerField(default=0)
    wickets = IntegerField(default=0)
    maidens = IntegerField(default=0)
    average = FloatField(null=True)
    economy = FloatField(null=True)
    strike_rate = FloatField(null=True)
    best_inning = CharField(max_length=20, null=True)
    best_match = CharField(max_length=20, null=True)
    wicket4i = IntegerField(default=0)
    wicket5i = IntegerField(default=0)

    class Meta:
        table_name = "bowling_aggregates"
        indexes = ((("player", "stat_type"), True),)

    @classmethod
    def upsert_aggregate(cls, player: Player, stat_type: str, data: dict) -> "BowlingAggregate":
        return cls.upsert({"player": player, "stat_type": stat_type}, data)


class TeamStats(BaseModel):
    id = AutoField()
    team = ForeignKeyField(Team, backref="team_stats", unique=True)
    total_runs = IntegerField(default=0)
    total_wickets = IntegerField(default=0)
    total_centuries = IntegerField(default=0)
    total_fifties = IntegerField(default=0)
    matches_won = IntegerField(default=0)
    extra_runs_conceded = IntegerField(default=0)
    highest_score = CharField(max_length=20, null=True)
    lowest_score = CharField(max_length=20, null=True)
    highest_win_margin_runs = IntegerField(null=True)
    lowest_win_margin_runs = IntegerField(null=True)
    highest_win_margin_wickets = IntegerField(null=True)
    lowest_win_margin_wickets = IntegerField(null=True)

    class Meta:
        table_name = "team_stats"

    @classmethod
    def upsert_stats(cls, team: Team, data: dict) -> "TeamStats":
        return cls.upsert({"team": team}, data)
