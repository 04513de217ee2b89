from peewee import (
    AutoField,
    BigIntegerField,
    BooleanField,
    CharField,
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    TextField,
)

from db.base import BaseModel
from db.models.cricket.competitions import Competition, Venue
from db.models.cricket.teams import Team

# Match.status values used by the source feed
STATUS_SCHEDULED = 1
STATUS_COMPLETED = 2
STATUS_LIVE = 3


class Match(BaseModel):
    id = AutoField()
    match_id = IntegerField(unique=True)
    title = CharField(max_length=255, null=True)
    short_title = CharField(max_length=100, null=True)
    subtitle = CharField(max_length=255, null=True)
    match_number = CharField(max_length=20, null=True)
    format = IntegerField(null=True)
    format_str = CharField(max_length=20, null=True)
    status = IntegerField(null=True, index=True)
    status_str = CharField(max_length=50, null=True)
    status_note = TextField(null=True)
    date_start = DateTimeField(null=True, index=True)
    date_end = DateTimeField(null=True)
    timestamp_start = BigIntegerField(null=True)
    timestamp_end = BigIntegerField(null=True)
    date_start_ist = DateTimeField(null=True)
    date_end_ist = DateTimeField(null=True)

    team_a = ForeignKeyField(Team, backref="home_matches")
    team_a_scores_full = CharField(max_length=100, null=True)
    team_a_scores = CharField(max_length=50, null=True)
    team_a_overs = CharField(max_length=20, null=True)
    team_b = ForeignKeyField(Team, backref="away_matches")
    team_b_scores_full = CharField(max_length=100, null=True)
    team_b_scores = CharField(max_length=50, null=True)
    team_b_overs = CharField(max_length=20, null=True)

    result = TextField(null=True)
    result_type = IntegerField(null=True)
    win_margin = CharField(max_length=50, null=True)
    winning_team = ForeignKeyField(Team, null=True, backref="won_matches")
    toss_text = TextField(null=True)
    toss_winner = ForeignKeyField(Team, null=True, backref="toss_wins")
    toss_decision = IntegerField(null=True)
    umpires = TextField(null=True)
    referee = CharField(max_length=255, null=True)
    has_commentary = BooleanField(default=False)
    has_wagon = BooleanField(default=False)
    latest_inning_number = IntegerField(null=True)

    venue = ForeignKeyField(Venue, backref="matches")
    competition = ForeignKeyField(Competition, backref="matches")

    class Meta:
        table_name = "matches"

    def __repr__(self):
        return f"<Match(match_id={self.match_id}, short_title='{self.short_title}')>"

    @classmethod
    def by_match_id(cls, match_id) -> "Match | None":
        if match_id is None:
            return None
        try:
            match_id = int(match_id)
        except (TypeError, ValueError):
            return None
        return cls.get_or_none(cls.match_id == match_id)

    @classmethod
    def upsert_match(cls, match_id: int, data: dict) -> "Match":
        return cls.upsert({"match_id": match_id}, data)
