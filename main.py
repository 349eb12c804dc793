"""
Mesh Generation - entry point for building and tracking structured 2D meshes.

Usage:
    uv run python main.py
    uv run python main.py mesh=uniform mesh.nx=32 mesh.ny=16 mesh.width=2.0
    uv run python main.py mesh=nonuniform 'mesh.face_locations_x=[0,1,3,6]'
    uv run python main.py mesh=tilted mesh.nx=20 mesh.ny=10 plot=false
    uv run python main.py -m mesh=uniform,nonuniform,tilted
"""

import logging
import sys
import tempfile
from pathlib import Path

import hydra
import mlflow
import numpy as np
from dotenv import load_dotenv
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

load_dotenv()
sys.path.insert(0, str(Path(__file__).parent / "src"))

from meshing import MeshStructure, quality_report  # noqa: E402

log = logging.getLogger(__name__)


def setup_mlflow(cfg: DictConfig) -> str:
    """Point MLflow at the configured store and return the experiment name."""
    mlflow.set_tracking_uri(cfg.mlflow.tracking_uri)

    experiment_name = cfg.experiment_name
    try:
        mlflow.set_experiment(experiment_name)
    except Exception as exc:
        experiment_name = f"{experiment_name}-restored"
        log.warning(f"MLflow set_experiment failed ({exc}); using '{experiment_name}'")
        mlflow.set_experiment(experiment_name)

    return experiment_name


def build_mesh(cfg: DictConfig) -> MeshStructure:
    """Instantiate the configured mesh builder."""
    return instantiate(cfg.mesh, _convert_="all")


def save_arrays(mesh: MeshStructure, output_dir: Path) -> Path:
    """Write mesh arrays to a compressed .npz file."""
    path = output_dir / "mesh.npz"
    np.savez_compressed(
        path,
        number_of_cells=np.array(mesh.number_of_cells),
        cell_size_x=mesh.cell_size.x,
        cell_size_y=mesh.cell_size.y,
        cell_centers_x=mesh.cell_centers.x,
        cell_centers_y=mesh.cell_centers.y,
        face_centers_x=mesh.face_centers.x,
        face_centers_y=mesh.face_centers.y,
        ghost_cell_indices=mesh.ghost_cell_indices,
    )
    return path


def run(cfg: DictConfig) -> str:
    """Build the mesh and log it to MLflow. Returns run_id."""
    mode = cfg.mesh.mode
    mesh = build_mesh(cfg)
    run_name = f"{mode}_nx{mesh.nx}_ny{mesh.ny}"

    summary = mesh.summary()
    quality = quality_report(mesh)
    log.info(f"Built {mode} mesh: nx={mesh.nx}, ny={mesh.ny}")
    log.info(f"Quality: {quality}")

    with mlflow.start_run(run_name=run_name, tags={"mode": mode}) as run:
        mlflow.log_params({k: v for k, v in summary.items() if k in ("nx", "ny", "tilted")})
        mlflow.log_dict(OmegaConf.to_container(cfg), "config.yaml")
        mlflow.log_metrics({k: float(v) for k, v in summary.items() if k not in ("nx", "ny", "tilted")})
        mlflow.log_metrics(quality)

        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir = Path(tmpdir)
            if cfg.get("save_arrays", True):
                mlflow.log_artifact(str(save_arrays(mesh, tmpdir)))
                vtk_path = tmpdir / "mesh.vts"
                mesh.to_vtk().save(str(vtk_path))
                mlflow.log_artifact(str(vtk_path))

            if cfg.get("plot", True):
                from shared.plotting import save_mesh_plot

                mlflow.log_artifact(str(save_mesh_plot(mesh, tmpdir / "mesh.png")))

        log.info(f"Done: run {run.info.run_id[:8]}")
        return run.info.run_id


@hydra.main(config_path="conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    log.info(f"Mesh mode: {cfg.mesh.mode}")
    log.info(f"MLflow experiment: {setup_mlflow(cfg)}")
    run(cfg)


if __name__ == "__main__":
    main()
