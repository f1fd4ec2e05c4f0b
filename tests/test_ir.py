from jsol.ir import LinkContext, Module, Operation
from jsol.parse import ModuleKind, RawJsolModule, RawOperation


def test_resolve_nop():
    assert Operation.resolve_operation(LinkContext(), RawOperation.NOP) is Operation.NOP


def test_new_context_is_empty():
    ctx = LinkContext()
    assert ctx.modules == []
    assert ctx == LinkContext()


def test_resolve_entrypoint_keeps_operation_count():
    raw = RawJsolModule(ModuleKind.ENTRYPOINT, [RawOperation.NOP] * 3)
    ctx = LinkContext()
    ctx.resolve_module(raw)
    assert len(ctx.modules) == 1
    assert ctx.modules[0].operations == [Operation.NOP] * 3


def test_resolve_module_without_operations():
    ctx = LinkContext()
    ctx.resolve_module(RawJsolModule(ModuleKind.MODULE))
    assert ctx.modules == [Module()]


def test_modules_are_appended_in_order():
    ctx = LinkContext()
    ctx.resolve_module(RawJsolModule(ModuleKind.MODULE, [RawOperation.NOP]))
    ctx.resolve_module(RawJsolModule(ModuleKind.ENTRYPOINT))
    assert [len(m.operations) for m in ctx.modules] == [1, 0]


def test_resolved_module_is_independent_of_raw():
    raw = RawJsolModule(ModuleKind.ENTRYPOINT, [RawOperation.NOP])
    ctx = LinkContext()
    ctx.resolve_module(raw)
    raw.operations.append(RawOperation.NOP)
    assert ctx.modules[0].operations == [Operation.NOP]