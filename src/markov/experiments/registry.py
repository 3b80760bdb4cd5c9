from markov.sources import TextFile, TwoStateChain

SOURCE_REGISTRY = {
    "text_file": TextFile,
    "two_state": TwoStateChain,
}
