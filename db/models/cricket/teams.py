from peewee import AutoField, CharField, IntegerField

from db.base import BaseModel


class Team(BaseModel):
    id = AutoField()
    tid = IntegerField(unique=True)
    title = CharField(max_length=255, null=True)
    abbr = CharField(max_length=20, null=True)
    alt_name = CharField(max_length=255, null=True)
    type = CharField(max_length=50, null=True)
    thumb_url = CharField(max_length=500, null=True)
    logo_url = CharField(max_length=500, null=True)
    country = CharField(max_length=100, null=True)
    sex = CharField(max_length=20, default="male")

    class Meta:
        table_name = "teams"

    def __repr__(self):
        return f"<Team(tid={self.tid}, abbr='{self.abbr}')>"

    @classmethod
    def by_tid(cls, tid) -> "Team | None":
        if tid is None:
            return None
        try:
            tid = int(tid)
        except (TypeError, ValueError):
            return None
        return cls.get_or_none(cls.tid == tid)

    @classmethod
    def upsert_team(cls, tid: int, data: dict) -> "Team":
        return cls.upsert({"tid": tid}, data)
