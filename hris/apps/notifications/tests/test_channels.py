from django.test import override_settings

from hris.apps.notifications.domain.channels import resolve_targets, shared_channel, supervisor_channel


class TestChannelTargets:

    def test_shared_only_without_recipient(self):
        targets = resolve_targets(None)
        assert [t.name for t in targets] == ['notifications']
        assert not targets[0].is_private

    def test_shared_and_private_with_recipient(self):
        targets = resolve_targets(15)
        assert [t.name for t in targets] == ['notifications', 'supervisor.15']
        assert targets[1].is_private
        assert targets[1].recipient_id == 15

    @override_settings(HRIS_NOTIFICATIONS={'SHARED_CHANNEL': 'hr-feed', 'SUPERVISOR_CHANNEL_PREFIX': 'boss.'})
    def test_names_come_from_settings(self):
        assert shared_channel().name == 'hr-feed'
        assert supervisor_channel(3).name == 'boss.3'
