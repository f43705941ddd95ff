"""
Tests for the review/selection state machine
"""

import asyncio

import pytest

from exceptions import RecipeIndexError, WorkflowStateError
from models.recipe import Recipe
from models.session import WorkflowStatus
from services.review_workflow import ReviewWorkflow


class TestWorkflowTransitions:

    @pytest.fixture
    def workflow(self, fake_lookup):
        return ReviewWorkflow(fake_lookup)

    def test_starts_empty(self, workflow):
        assert workflow.status == WorkflowStatus.empty
        assert workflow.active_report is None

    def test_load_batch_moves_to_pending_review(self, workflow, sample_recipes, fake_lookup):
        workflow.load_batch(sample_recipes)

        assert workflow.status == WorkflowStatus.pending_review
        assert workflow.active_report is None
        assert fake_lookup.calls == []

    def test_empty_upload_stays_empty(self, workflow):
        assert workflow.load_batch([]) is None
        assert workflow.status == WorkflowStatus.empty

    @pytest.mark.asyncio
    async def test_approve_without_batch_is_rejected(self, workflow):
        with pytest.raises(WorkflowStateError):
            await workflow.approve()

    @pytest.mark.asyncio
    async def test_select_before_approval_is_rejected(self, workflow, sample_recipes, fake_lookup):
        workflow.load_batch(sample_recipes)

        with pytest.raises(WorkflowStateError):
            await workflow.select_recipe(1)
        assert fake_lookup.calls == []

    @pytest.mark.asyncio
    async def test_approve_reports_first_recipe(self, workflow, sample_recipes):
        workflow.load_batch(sample_recipes)

        report = await workflow.approve()

        assert workflow.status == WorkflowStatus.approved
        assert workflow.active_index == 0
        assert report.name == "Cake"
        assert workflow.active_report == report

    @pytest.mark.asyncio
    async def test_select_recomputes_report(self, workflow, sample_recipes):
        workflow.load_batch(sample_recipes)
        await workflow.approve()

        report = await workflow.select_recipe(2)

        assert workflow.active_index == 2
        assert report.name == "Mystery Stew"
        assert report.unrecognized == ["dragonfruit"]

    @pytest.mark.asyncio
    async def test_select_out_of_range(self, workflow, sample_recipes):
        workflow.load_batch(sample_recipes)
        await workflow.approve()

        with pytest.raises(RecipeIndexError):
            await workflow.select_recipe(3)
        assert workflow.active_index == 0

    @pytest.mark.asyncio
    async def test_reselecting_same_index_is_idempotent(self, workflow, sample_recipes, fake_lookup):
        workflow.load_batch(sample_recipes)
        await workflow.approve()

        first = await workflow.select_recipe(1)
        calls = len(fake_lookup.calls)
        second = await workflow.select_recipe(1)

        assert first == second
        assert first is not second
        assert len(fake_lookup.calls) == calls

    @pytest.mark.asyncio
    async def test_reupload_resets_approval_but_keeps_cache(self, workflow, sample_recipes, fake_lookup):
        workflow.load_batch(sample_recipes)
        await workflow.approve()
        cached = len(workflow.cache)

        workflow.load_batch([Recipe(name="Pudding", ingredients=["milk"])])

        assert workflow.status == WorkflowStatus.pending_review
        assert workflow.active_report is None
        assert workflow.active_index is None
        assert len(workflow.cache) == cached

        await workflow.approve()
        assert fake_lookup.calls.count("milk") == 1

    @pytest.mark.asyncio
    async def test_reupload_can_clear_cache(self, fake_lookup, sample_recipes):
        workflow = ReviewWorkflow(fake_lookup, clear_cache_on_upload=True)
        workflow.load_batch(sample_recipes)
        await workflow.approve()

        workflow.load_batch(sample_recipes)

        assert len(workflow.cache) == 0


class TestSelectionSupersession:

    @pytest.mark.asyncio
    async def test_later_selection_wins(self, fake_lookup, sample_recipes):
        workflow = ReviewWorkflow(fake_lookup)
        workflow.load_batch(sample_recipes)
        await workflow.approve()
        release = fake_lookup.block("eggs")

        slow = asyncio.create_task(workflow.select_recipe(1))
        await asyncio.sleep(0)
        fast = await workflow.select_recipe(2)
        release.set()
        stale = await slow

        assert stale.name == "Omelette"
        assert workflow.active_index == 2
        assert workflow.active_report == fast
        assert workflow.active_report.name == "Mystery Stew"
        # The stale run still resolved its ingredients
        assert "eggs" in workflow.cache

    @pytest.mark.asyncio
    async def test_upload_during_processing_discards_report(self, fake_lookup, sample_recipes):
        workflow = ReviewWorkflow(fake_lookup)
        workflow.load_batch(sample_recipes)
        release = fake_lookup.block("flour")

        pending = asyncio.create_task(workflow.approve())
        await asyncio.sleep(0)
        workflow.load_batch([Recipe(name="Toast", ingredients=["bread"])])
        release.set()
        await pending

        assert workflow.status == WorkflowStatus.pending_review
        assert workflow.active_report is None


class TestSnapshot:

    @pytest.mark.asyncio
    async def test_snapshot_reflects_state(self, fake_lookup, sample_recipes):
        workflow = ReviewWorkflow(fake_lookup)
        workflow.load_batch(sample_recipes, source_filename="recipes.xlsx")
        await workflow.approve()

        snapshot = workflow.snapshot()

        assert snapshot.status == "approved"
        assert snapshot.batch_id == workflow.store.batch.id
        assert snapshot.active_index == 0
        assert snapshot.report.name == "Cake"
        assert snapshot.cache_size == 3
