from peewee import AutoField, BooleanField, CharField, FloatField, ForeignKeyField, IntegerField

from db.base import BaseModel
from db.models.cricket.competitions import Competition
from db.models.cricket.teams import Team


class Standing(BaseModel):
    id = AutoField()
    competition = ForeignKeyField(Competition, backref="standings")
    team = ForeignKeyField(Team, backref="standings")
    round_id = IntegerField(index=True)
    round_name = CharField(max_length=100, null=True)
    played = IntegerField(default=0)
    win = IntegerField(default=0)
    loss = IntegerField(default=0)
    draw = IntegerField(default=0)
    nr = IntegerField(default=0)
    over_for = FloatField(null=True)
    run_for = IntegerField(null=True)
    over_against = FloatField(null=True)
    run_against = IntegerField(null=True)
    net_run_rate = FloatField(null=True)
    points = IntegerField(default=0)
    last_five_matches = CharField(max_length=100, null=True)
    last_five_results = CharField(max_length=100, null=True)
    qualified = BooleanField(default=False)

    class Meta:
        table_name = "standings"
        indexes = ((("competition", "team", "round_id"), True),)

    def __repr__(self):
        return f"<Standing(team={self.team_id}, round_id={self.round_id}, points={self.points})>"

    @classmethod
    def upsert_standing(cls, competition: Competition, team: Team, round_id: int, data: dict) -> "Standing":
        return cls.upsert(
            {"competition": competition, "team": team, "round_id": round_id},
            data,
        )
