from peewee import AutoField, CharField, FloatField, ForeignKeyField, IntegerField, TextField

from db.base import BaseModel
from db.models.cricket.teams import Team


class Player(BaseModel):
    id = AutoField()
    pid = IntegerField(unique=True)
    title = CharField(max_length=255, null=True)
    short_name = CharField(max_length=255, null=True)
    first_name = CharField(max_length=255, null=True)
    last_name = CharField(max_length=255, null=True)
    birthdate = CharField(max_length=50, null=True)
    birthplace = CharField(max_length=255, null=True)
    country = CharField(max_length=100, null=True)
    playing_role = CharField(max_length=50, null=True)
    batting_style = CharField(max_length=100, null=True)
    bowling_style = CharField(max_length=100, null=True)
    fantasy_rating = FloatField(null=True)
    nationality = CharField(max_length=100, null=True)
    twitter_profile = CharField(max_length=255, null=True)
    instagram_profile = CharField(max_length=255, null=True)

    class Meta:
        table_name = "players"

    def __repr__(self):
        return f"<Player(pid={self.pid}, title='{self.title}')>"

    @classmethod
    def by_pid(cls, pid) -> "Player | None":
        if pid is None or pid == "":
            return None
        try:
            pid = int(pid)
        except (TypeError, ValueError):
            return None
        return cls.get_or_none(cls.pid == pid)

    @classmethod
    def upsert_player(cls, pid: int, data: dict) -> "Player":
        return cls.upsert({"pid": pid}, data)


class TeamSquad(BaseModel):
    id = AutoField()
    team = ForeignKeyField(Team, backref="squads", on_delete="CASCADE")
    player = ForeignKeyField(Player, backref="squads", on_delete="CASCADE")
    season = CharField(max_length=10)

    class Meta:
        table_name = "team_squads"
        indexes = ((("team", "player", "season"), True),)

    @classmethod
    def add_member(cls, team: Team, player: Player, season: str) -> "TeamSquad":
        return cls.upsert({"team": team, "player": player, "season": season})


class PlayerCareerStats(BaseModel):
    id = AutoField()
    player = ForeignKeyField(Player, backref="career_stats", unique=True, on_delete="CASCADE")
    batting_stats = TextField(default="{}")  # JSON string
    bowling_stats = TextField(default="{}")  # JSON string

    class Meta:
        table_name = "player_career_stats"

    @classmethod
    def upsert_career(cls, player: Player, batting_stats: str, bowling_stats: str) -> "PlayerCareerStats":
        return cls.upsert(
            {"player": player},
            {"batting_stats": batting_stats, "bowling_stats": bowling_stats},
        )
