from __future__ import annotations

from datetime import datetime
from pathlib import Path
import uuid

from fastapi import APIRouter, BackgroundTasks, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse

from image_combiner.services.combine_pipeline import run_pipeline
from image_combiner.services.interleave import GROUP_BYTES, PIXEL_BYTES
from image_combiner.services.status_store import read_status, write_status


router = APIRouter(prefix="/combine", tags=["combine"])


def _slugify(text: str) -> str:
	return "".join(ch if (ch.isalnum() or ch in ("-", "_")) else "-" for ch in text).strip("-_").lower()


def _read_completed(job_id: str) -> dict:
	if _slugify(job_id) != job_id:
		raise HTTPException(status_code=404, detail="unknown job")
	data = read_status(job_id)
	if data.get("status") == "unknown":
		raise HTTPException(status_code=404, detail="unknown job")
	return data


@router.post("/upload", summary="Upload two images and start combining them in the background")
async def upload(
	background_tasks: BackgroundTasks,
	image_1: UploadFile = File(...),
	image_2: UploadFile = File(...),
	group_bytes: int = Form(GROUP_BYTES),
):
	if group_bytes <= 0 or group_bytes % PIXEL_BYTES:
		raise HTTPException(status_code=422, detail=f"group_bytes must be a positive multiple of {PIXEL_BYTES}")
	files_meta = []
	for f in (image_1, image_2):
		data = await f.read()
		files_meta.append({"filename": f.filename or "image.png", "data": data})
	filenames = [m["filename"] for m in files_meta]
	# "<first_filename_stem>_<ddmmyyyy>_<short uuid>"
	first_stem = _slugify(Path(filenames[0]).stem) or "job"
	date_str = datetime.now().strftime("%d%m%Y")
	job_id = f"{first_stem}_{date_str}_{uuid.uuid4().hex[:8]}"
	write_status(job_id, {"job_id": job_id, "status": "queued", "step": "Queued"})
	background_tasks.add_task(run_pipeline, job_id, files_meta, group_bytes)
	return {
		"job_id": job_id,
		"status": "queued",
		"filenames": filenames,
		"group_bytes": group_bytes,
		"status_endpoint": f"/combine/status/{job_id}",
		"result_endpoint": f"/combine/result/{job_id}",
		"preview_endpoint": f"/combine/preview/{job_id}",
	}


@router.get("/status/{job_id}", summary="Get job status")
def status(job_id: str):
	if _slugify(job_id) != job_id:
		return {"job_id": job_id, "status": "unknown"}
	return read_status(job_id)


@router.get("/result/{job_id}", summary="Download the combined image")
def result(job_id: str):
	data = _read_completed(job_id)
	if data.get("status") != "completed":
		return {"job_id": job_id, "status": data.get("status"), "message": "not completed yet", "error": data.get("error")}
	return FileResponse(data["combined"])


@router.get("/preview/{job_id}", summary="Get a JPEG preview of the combined image")
def preview(job_id: str):
	data = _read_completed(job_id)
	if data.get("status") != "completed":
		return {"job_id": job_id, "status": data.get("status"), "message": "not completed yet"}
	return FileResponse(data["preview"], media_type="image/jpeg")
