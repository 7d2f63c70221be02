"""Result compiler - picks the winning proposal of a closed election."""

from election.models.elections import Proposal, Winner


class ResultCompiler:
    """Single linear scan keeping a running maximum.

    The comparison is strict, so the lowest-index proposal among tied
    maxima wins. With no votes at all the first proposal wins with 0.
    """

    def compile(self, proposals: list[Proposal]) -> Winner:
        if not proposals:
            raise ValueError("Cannot compile an election without proposals")

        winning = proposals[0]
        winning_count = 0
        for proposal in proposals:
            if proposal.vote_count > winning_count:
                winning = proposal
                winning_count = proposal.vote_count

        return Winner(index=winning.index, name=winning.name, vote_count=winning_count)
