from core.errors import ApiError
from db.models import Competition, Standing, Team
from schemas.common import ApiStatus
from schemas.standings import RoundItem, RoundsResp, StandingItem, StandingsResp, TeamStandingResp


def _with_relations():
    return (
        Standing.select(Standing, Team, Competition)
        .join(Team)
        .switch(Standing)
        .join(Competition)
    )


class StandingsService:

    @staticmethod
    async def get_standings(round_id: int | None = None) -> StandingsResp:
        """Points table for a round, or the latest round when none is given."""
        if not round_id:
            round_id = (
                Standing.select(Standing.round_id)
                .order_by(Standing.round_id.desc())
                .limit(1)
                .scalar()
            )

        if not round_id:
            return StandingsResp(status=ApiStatus.SUCCESS, message="No standings available", data=[])

        rows = (
            _with_relations()
            .where(Standing.round_id == round_id)
            .order_by(Standing.points.desc(), Standing.net_run_rate.desc(nulls="last"), Standing.id)
        )
        data = [StandingItem.model_validate(row) for row in rows]

        return StandingsResp(
            status=ApiStatus.SUCCESS,
            message="Standings fetched successfully",
            data=data,
        )

    @staticmethod
    async def get_rounds() -> RoundsResp:
        rows = (
            Standing.select(Standing.round_id, Standing.round_name)
            .distinct()
            .order_by(Standing.round_id)
        )
        data = []
        seen = set()
        for row in rows:
            # Rounds whose name differs between competitions still list once
            if row.round_id in seen:
                continue
            seen.add(row.round_id)
            data.append(RoundItem(round_id=row.round_id, round_name=row.round_name))

        return RoundsResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} rounds", data=data)

    @staticmethod
    async def get_team_standing(team_id: int) -> TeamStandingResp:
        row = (
            _with_relations()
            .where(Standing.team == team_id)
            .order_by(Standing.round_id.desc())
            .first()
        )
        if row is None:
            raise ApiError.not_found("Team standing not found")

        return TeamStandingResp(
            status=ApiStatus.SUCCESS,
            message="Team standing fetched successfully",
            data=StandingItem.model_validate(row),
        )
