import logging

from .layers import Linear
from .helpers.Backend import backend
from .helpers.errors import ShapeMismatchError

logger = logging.getLogger(__name__)


class Model:
    """
    Feed-forward stack Layer -> Activation -> Layer -> Activation -> ... with a
    terminal loss. activations[i] is applied to the output of layers[i]; stages
    past the end of the activation list pass their output through unchanged.

    A training step is model.forward(X), loss.forward(prediction, Y), then
    model.backward(). After that every layer's dW / db holds its gradient.
    """

    def __init__(self, layers, activations, loss):
        layers = list(layers)
        activations = list(activations or [])
        if not layers:
            raise ValueError("Model needs at least one layer")
        if len(activations) > len(layers):
            raise ValueError(
                f"got {len(activations)} activations for {len(layers)} layers; "
                "each activation pairs with the layer at the same position"
            )
        for kind, items in (("layer", layers), ("activation", activations)):
            if len({id(item) for item in items}) != len(items):
                raise ValueError(f"the same {kind} instance appears more than once; "
                                 "each stage needs its own instance")
        for i, (prev, nxt) in enumerate(zip(layers, layers[1:])):
            out_size = getattr(prev, "out_features", None)
            in_size = getattr(nxt, "in_features", None)
            if out_size is not None and in_size is not None and out_size != in_size:
                raise ShapeMismatchError(
                    f"layer {i} outputs {out_size} features but layer {i + 1} expects {in_size}"
                )

        self.layers = layers
        self.activations = activations
        self.loss = loss

    def forward(self, X):
        A = backend.ensure_matrix(X, "model input")
        for i, layer in enumerate(self.layers):
            A = layer.forward(A)
            if i < len(self.activations):
                A = self.activations[i].forward(A)
        logger.debug("Model forward through %d stages -> %s", len(self.layers), A.shape)
        return A

    def predict(self, X):
        return self.forward(X)

    def backward(self):
        # seed from the loss of this step, then undo each stage in reverse:
        # activation i first, then layer i
        dLdA = self.loss.backward()
        for i in reversed(range(len(self.layers))):
            if i < len(self.activations):
                dLdA = self.activations[i].backward(dLdA)
            dLdA = self.layers[i].backward(dLdA)
        return dLdA

    def parameters(self):
        ps = []
        for L in self.layers:
            for p, g in zip(L.params(), L.grads()):
                ps.append([p, g])
        return ps

    def __repr__(self):
        lines = [f"{type(self).__name__}("]
        for i, layer in enumerate(self.layers):
            act = self.activations[i] if i < len(self.activations) else None
            lines.append(f"  ({i}) {layer!r} -> {act!r}" if act else f"  ({i}) {layer!r}")
        lines.append(f"  loss: {self.loss!r}")
        lines.append(")")
        return "\n".join(lines)


class LinearModel(Model):
    """
    Stack of num_layers Linear layers: input_dim -> output_dim, then
    output_dim -> output_dim for every later layer.
    """

    def __init__(self, input_dim, output_dim, num_layers, loss, activations=None, initializer=None):
        if num_layers < 1:
            raise ValueError(f"num_layers must be at least 1, got {num_layers}")
        layers = [Linear(input_dim, output_dim, initializer=initializer)]
        layers += [Linear(output_dim, output_dim, initializer=initializer)
                   for _ in range(num_layers - 1)]
        super().__init__(layers, activations, loss)
