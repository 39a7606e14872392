from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from image_combiner import settings
from image_combiner.routers.combine_images import router as combine_router


def create_app() -> FastAPI:
	app = FastAPI(title="Image Combiner API", version="0.1.0")
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ORIGINS,
		allow_credentials=False,
		allow_methods=["GET", "POST"],
		allow_headers=["*"],
	)
	app.include_router(combine_router)
	return app


app = create_app()


if __name__ == "__main__":
	# uvicorn image_combiner.main:app --reload
	import uvicorn

	uvicorn.run("image_combiner.main:app", host="0.0.0.0", port=8000, reload=True)
