from models.compartment import Compartment, COMPARTMENT_ORDER
from models.shipment import ShipmentInputs
from models.distribution import (
    CapacityTable, ExceedsMap, PieceAllocation, WeightMap,
    CorrectionResult, DistributionResult, DistributionRun, DistributionTotals,
    OverflowMove, RemovalReport,
)
